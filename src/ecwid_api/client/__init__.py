"""HTTP client module for ecwid_api.

Provides the store client facade and the pieces it is built from:

Classes:
    :class:`StoreClient` -- configuration, connection cache, ``get``/``post``
    primitives, and resource client accessors for one store.
    :class:`Connection` -- an :class:`httpx.Client` bound to one store URL.
    :class:`ApiResponse` -- status, headers, and a :class:`JsonBody` or
    :class:`RawBody`.

Example::

    from ecwid_api.client import StoreClient

    with StoreClient(store_id="12345") as client:
        resp = client.get("categories", {"parent": 0})
"""

from ecwid_api.client.connection import Connection, resolve_connection
from ecwid_api.client.response import (
    ApiResponse,
    JsonBody,
    RawBody,
    decode_response,
    is_json_content_type,
)
from ecwid_api.client.store_client import StoreClient

__all__ = [
    "StoreClient",
    "Connection",
    "resolve_connection",
    "ApiResponse",
    "JsonBody",
    "RawBody",
    "decode_response",
    "is_json_content_type",
]
