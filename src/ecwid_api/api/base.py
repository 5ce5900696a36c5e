"""Base class shared by the resource clients.

A resource client is a thin mapping from domain operations to
:meth:`~ecwid_api.client.store_client.StoreClient.get` /
:meth:`~ecwid_api.client.store_client.StoreClient.post` calls.  It holds
nothing but a back-reference to its owning store client: connection
management, configuration, and secret keys are all read from there at call
time, so resource clients observe configuration changes immediately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, TypeVar

from pydantic import BaseModel

from ecwid_api.client.response import ApiResponse
from ecwid_api.exceptions import DecodeError

if TYPE_CHECKING:
    from ecwid_api.client.store_client import StoreClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceApi:
    """Base for :class:`CategoryApi`, :class:`OrderApi` and :class:`ProductApi`.

    Args:
        client: The owning :class:`~ecwid_api.client.store_client.StoreClient`.
    """

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    def _get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        response = self.client.get(path, params)
        response.raise_for_status()
        return _json_value(response)

    def _find_json(self, path: str, params: Mapping[str, Any]) -> Any:
        """Like :meth:`_get_json` but returns ``None`` on HTTP 404."""
        response = self.client.get(path, params)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return _json_value(response)

    def _post_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        response = self.client.post(path, params)
        response.raise_for_status()
        return _json_value(response)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(store_id={self.client.store_id!r})"


def _json_value(response: ApiResponse) -> Any:
    if not response.is_json:
        raise DecodeError(
            f"Expected a JSON response from {response.method} {response.url}, "
            f"got {response.headers.get('content-type', 'no content type')}",
            method=response.method,
            url=response.url,
        )
    return response.data


def parse_list(model: type[ModelT], data: Any) -> list[ModelT]:
    """Validate a JSON array into a list of *model* instances (``None`` -> ``[]``)."""
    if data is None:
        return []
    return [model.model_validate(item) for item in data]


def entity_id(value: Any) -> Any:
    """Accept either an entity model with an ``id`` or a bare id."""
    return getattr(value, "id", value)
