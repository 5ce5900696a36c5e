"""Transport-ready connections bound to a single store URL.

A :class:`Connection` wraps an :class:`httpx.Client` whose ``base_url`` is
the fully resolved store URL (``{base_url}/{store_id}``).  Paths passed to
:meth:`Connection.get` and :meth:`Connection.post` are resolved relative to
it, so ``"categories"`` and ``"/categories"`` both address
``{store_url}/categories``.

* GET parameters travel in the query string.
* POST parameters are form-urlencoded into the request body.
* Responses are decoded by :func:`~ecwid_api.client.response.decode_response`.
* Network failures surface as :class:`~ecwid_api.exceptions.TransportError`
  tagged with the method and URL; nothing is retried.

Connections are created by :func:`resolve_connection` and owned by a
:class:`~ecwid_api.client.store_client.StoreClient`, which discards them
whenever the store URL changes.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from ecwid_api.client.response import ApiResponse, decode_response
from ecwid_api.exceptions import TransportError
from ecwid_api.models import RequestConfig
from ecwid_api.output import get_output

Params = Mapping[str, Any]


class Connection:
    """A reusable HTTP handle bound to one store URL.

    Args:
        store_url: Absolute URL every request path is resolved against.
        request_config: Timeout and SSL settings.
        transport: Optional :mod:`httpx` transport.  A connection never
            closes a transport it was handed, so one transport may back
            several successive connections.
    """

    def __init__(
        self,
        store_url: str,
        request_config: Optional[RequestConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        config = request_config or RequestConfig()
        self._store_url = store_url
        self._owns_transport = transport is None
        self._client: Optional[httpx.Client] = httpx.Client(
            base_url=store_url,
            timeout=config.timeout,
            verify=config.verify_ssl,
            transport=transport,
            follow_redirects=True,
        )

    @property
    def store_url(self) -> str:
        return self._store_url

    @property
    def closed(self) -> bool:
        return self._client is None

    def get(self, path: str, params: Optional[Params] = None) -> ApiResponse:
        """Send a GET request with *params* in the query string."""
        return self._send("GET", path, params=dict(params or {}))

    def post(self, path: str, params: Optional[Params] = None) -> ApiResponse:
        """Send a POST request with *params* form-urlencoded in the body."""
        return self._send("POST", path, data=dict(params or {}))

    def close(self) -> None:
        """Release pooled connections.  Safe to call more than once."""
        if self._client is None:
            return
        if self._owns_transport:
            self._client.close()
        self._client = None

    def _send(self, method: str, path: str, **kwargs: Any) -> ApiResponse:
        if self._client is None:
            raise TransportError(
                f"Connection to {self._store_url} is closed",
                method=method,
                url=self._store_url,
            )

        request = self._client.build_request(method, path.lstrip("/"), **kwargs)
        url = str(request.url)
        output = get_output()
        output.debug(f"{method} {url}")

        try:
            response = self._client.send(request)
        except httpx.TransportError as exc:
            raise TransportError(
                f"{method} {url} failed: {exc}",
                method=method,
                url=url,
            ) from exc

        output.debug(f"HTTP {response.status_code} {response.reason_phrase or ''}".rstrip())
        return decode_response(response)


def resolve_connection(
    store_url: str,
    request_config: Optional[RequestConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Connection:
    """Build a :class:`Connection` for *store_url*."""
    get_output().debug(f"Resolving connection for {store_url}")
    return Connection(store_url, request_config, transport)
