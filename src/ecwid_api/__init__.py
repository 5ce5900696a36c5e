"""ecwid_api -- Python client for the Ecwid store REST API.

A :class:`StoreClient` manages the connection to a single store and exposes
generic ``get``/``post`` primitives plus resource clients for categories,
orders, and products::

    from ecwid_api import StoreClient

    client = StoreClient(store_id="12345", order_secret_key="ORDER_SECRET_KEY")
    recent = client.orders.all({"limit": 10})

Modules:
    client: Store client, connection resolver, and decoded responses.
    api: Resource clients (categories, orders, products).
    models: Pydantic configuration and entity models.
    config: Loading store configuration from the environment and JSON files.
    exceptions: Exception hierarchy.
    output: Stderr diagnostics.
"""

from ecwid_api.client import ApiResponse, StoreClient
from ecwid_api.exceptions import (
    ApiError,
    AuthError,
    ConfigurationError,
    DecodeError,
    EcwidApiError,
    NotFoundError,
    ServerError,
    TransportError,
)
from ecwid_api.models import DEFAULT_BASE_URL, RequestConfig, StoreConfig

__version__ = "0.1.0"

__all__ = [
    "StoreClient",
    "ApiResponse",
    "StoreConfig",
    "RequestConfig",
    "DEFAULT_BASE_URL",
    "EcwidApiError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "AuthError",
    "NotFoundError",
    "ServerError",
]
