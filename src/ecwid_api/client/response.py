"""Decoded API responses.

An :class:`ApiResponse` is built from an :class:`httpx.Response` by
:func:`decode_response`.  Its body is an explicit tagged value:

* :class:`JsonBody` -- the response's content type matches ``\\bjson$``
  (``application/json``, ``text/json``, ``application/vnd.api+json``...)
  and the body was parsed.
* :class:`RawBody` -- any other content type; the bytes are kept untouched.

Which variant is produced depends only on the ``Content-Type`` header, via
:func:`is_json_content_type`, never on the body itself.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import httpx

from ecwid_api.exceptions import (
    ApiError,
    AuthError,
    DecodeError,
    NotFoundError,
    ServerError,
)

_JSON_CONTENT_TYPE = re.compile(r"\bjson$")


def is_json_content_type(content_type: Optional[str]) -> bool:
    """Return True if *content_type* names a JSON media type.

    Media type parameters (``; charset=utf-8``) are ignored and the
    comparison is case-insensitive.

    Args:
        content_type: Raw ``Content-Type`` header value, or ``None``.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return bool(_JSON_CONTENT_TYPE.search(media_type))


@dataclass(frozen=True)
class JsonBody:
    """A parsed JSON body.  ``value`` is ``None`` for an empty body."""

    value: Any


@dataclass(frozen=True)
class RawBody:
    """An undecoded body."""

    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


Body = Union[JsonBody, RawBody]


@dataclass(frozen=True)
class ApiResponse:
    """Status, headers, and decoded body of a single API call.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers (case-insensitive mapping).
        body: :class:`JsonBody` or :class:`RawBody`.
        method: HTTP method of the request that produced this response.
        url: Fully resolved request URL.
    """

    status_code: int
    headers: Mapping[str, str] = field(repr=False)
    body: Body
    method: str = "GET"
    url: str = ""

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300

    @property
    def is_json(self) -> bool:
        return isinstance(self.body, JsonBody)

    @property
    def data(self) -> Any:
        """The parsed JSON value, or the raw bytes for non-JSON bodies."""
        if isinstance(self.body, JsonBody):
            return self.body.value
        return self.body.content

    def raise_for_status(self) -> None:
        """Raise a typed :class:`~ecwid_api.exceptions.ApiError` for 4xx/5xx statuses.

        Raises:
            AuthError: On 401 / 403.
            NotFoundError: On 404.
            ServerError: On 5xx.
            ApiError: On any other 4xx.
        """
        status = self.status_code
        if status < 400:
            return

        msg = _error_detail(self)
        prefix = f"HTTP {status}"
        full_msg = f"{prefix}: {msg}" if msg else prefix

        if status in (401, 403):
            raise AuthError(full_msg, status, method=self.method, url=self.url)
        if status == 404:
            raise NotFoundError(full_msg, status, method=self.method, url=self.url)
        if status >= 500:
            raise ServerError(full_msg, status, method=self.method, url=self.url)
        raise ApiError(full_msg, status, method=self.method, url=self.url)


def _error_detail(response: ApiResponse) -> str:
    """Extract a short error message from an error response body."""
    body = response.body
    if isinstance(body, JsonBody):
        detail = body.value
        if isinstance(detail, dict):
            return str(
                detail.get("errorMessage")
                or detail.get("message")
                or detail.get("error")
                or ""
            )
        return "" if detail is None else str(detail)
    return body.text[:200]


def decode_response(response: httpx.Response) -> ApiResponse:
    """Build an :class:`ApiResponse` from a completed :class:`httpx.Response`.

    Args:
        response: The raw transport response.  Its ``request`` supplies the
            method and URL recorded on the result.

    Returns:
        The decoded response.

    Raises:
        DecodeError: If the content type is JSON but the body does not parse.
    """
    method = response.request.method
    url = str(response.request.url)
    content = response.content

    body: Body
    if is_json_content_type(response.headers.get("content-type")):
        if not content.strip():
            body = JsonBody(None)
        else:
            try:
                body = JsonBody(json.loads(content))
            except ValueError as exc:
                raise DecodeError(
                    f"Invalid JSON in response to {method} {url}: {exc}",
                    method=method,
                    url=url,
                ) from exc
    else:
        body = RawBody(content)

    return ApiResponse(
        status_code=response.status_code,
        headers=response.headers,
        body=body,
        method=method,
        url=url,
    )
