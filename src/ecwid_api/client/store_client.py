"""Store client -- the public entry point of ecwid_api.

This module provides :class:`StoreClient`, which manages the connection to
a single Ecwid store:

- **Configuration** -- store id, base URL, and the Order/Product API secret
  keys, set through keyword arguments and/or a ``configure`` callback, then
  validated once.
- **Connection cache** -- the :class:`~ecwid_api.client.connection.Connection`
  is resolved on the first request and reused until ``store_id`` or
  ``base_url`` changes, at which point it is discarded.
- **Request primitives** -- :meth:`StoreClient.get` and
  :meth:`StoreClient.post`.
- **Resource clients** -- :attr:`~StoreClient.categories`,
  :attr:`~StoreClient.orders` and :attr:`~StoreClient.products`, created on
  first access and cached for the life of the client.

Example::

    from ecwid_api import StoreClient

    def configure(config):
        config.store_id = "12345"
        config.order_secret_key = "ORDER_SECRET_KEY"

    with StoreClient(configure) as client:
        roots = client.categories.root()
        response = client.get("categories", {"parent": 1})
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

import httpx

from ecwid_api.client.connection import Connection, resolve_connection
from ecwid_api.client.response import ApiResponse
from ecwid_api.exceptions import ConfigurationError
from ecwid_api.models import DEFAULT_BASE_URL, RequestConfig, StoreConfig
from ecwid_api.output import get_output

if TYPE_CHECKING:
    from ecwid_api.api.categories import CategoryApi
    from ecwid_api.api.orders import OrderApi
    from ecwid_api.api.products import ProductApi


class StoreClient:
    """Manages the connection and interface to a single Ecwid store.

    Keyword arguments are applied first; *configure*, when given, is then
    called with the new client so it can set or override any attribute.
    Only after both steps is the configuration validated.

    Args:
        configure: Optional callback receiving the client under construction.
        store_id: The Ecwid store id (required, here or in *configure*).
        base_url: API base URL; :data:`~ecwid_api.models.DEFAULT_BASE_URL`
            when unset.
        order_secret_key: Secret key for the Order API.
        product_secret_key: Secret key for the Product API.
        request: Timeout and SSL settings for the connection.
        transport: Optional :mod:`httpx` transport shared by every
            connection this client resolves (useful for proxies and tests).

    Raises:
        ConfigurationError: If no store id is set once configuration is done.
    """

    def __init__(
        self,
        configure: Optional[Callable[[StoreClient], Any]] = None,
        *,
        store_id: Optional[Union[str, int]] = None,
        base_url: Optional[str] = None,
        order_secret_key: Optional[str] = None,
        product_secret_key: Optional[str] = None,
        request: Optional[RequestConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._configured = False
        self._store_id: Optional[str] = None
        self._base_url: Optional[str] = None
        # None is the unresolved state; a Connection is the resolved one.
        self._connection: Optional[Connection] = None
        self._categories: Optional[CategoryApi] = None
        self._orders: Optional[OrderApi] = None
        self._products: Optional[ProductApi] = None

        self.order_secret_key = order_secret_key
        self.product_secret_key = product_secret_key
        self.request_config = request or RequestConfig()
        self._transport = transport

        if store_id is not None:
            self.store_id = store_id
        if base_url is not None:
            self.base_url = base_url

        if configure is not None:
            configure(self)

        if _is_blank(self._store_id):
            raise ConfigurationError("store_id is required")
        self._configured = True

    # ------------------------------------------------------------------ #
    # Alternate constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def from_config(
        cls,
        config: StoreConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> StoreClient:
        """Create a client from a validated :class:`~ecwid_api.models.StoreConfig`."""
        return cls(
            store_id=config.store_id,
            base_url=config.base_url,
            order_secret_key=config.order_secret_key,
            product_secret_key=config.product_secret_key,
            request=config.request,
            transport=transport,
        )

    @classmethod
    def from_env(
        cls,
        path: Optional[Union[str, Path]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> StoreClient:
        """Create a client from ``ECWID_*`` environment variables and an optional JSON file.

        See :func:`~ecwid_api.config.load_store_config` for the precedence rules.
        """
        from ecwid_api.config import load_store_config

        return cls.from_config(load_store_config(path), transport=transport)

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> StoreClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the cached connection, if any.

        The client stays usable; the next request resolves a new connection.
        """
        with self._lock:
            self._reset_connection()

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #

    @property
    def store_id(self) -> Optional[str]:
        """The Ecwid store id."""
        return self._store_id

    @store_id.setter
    def store_id(self, store_id: Optional[Union[str, int]]) -> None:
        value = None if store_id is None else str(store_id)
        if self._configured and _is_blank(value):
            raise ConfigurationError("store_id is required")
        with self._lock:
            self._reset_connection()
            self._store_id = value

    @property
    def base_url(self) -> str:
        """The base URL of the Ecwid API.

        Setting ``None`` restores :data:`~ecwid_api.models.DEFAULT_BASE_URL`.
        """
        return self._base_url if self._base_url is not None else DEFAULT_BASE_URL

    @base_url.setter
    def base_url(self, url: Optional[str]) -> None:
        with self._lock:
            self._reset_connection()
            self._base_url = url

    @property
    def store_url(self) -> str:
        """The URL of the API for the store (``{base_url}/{store_id}``)."""
        with self._lock:
            return f"{self.base_url}/{self._store_id}"

    @property
    def config(self) -> StoreConfig:
        """An immutable snapshot of the current configuration."""
        with self._lock:
            return StoreConfig(
                store_id=self._store_id or "",
                base_url=self._base_url,
                order_secret_key=self.order_secret_key,
                product_secret_key=self.product_secret_key,
                request=self.request_config,
            )

    # ------------------------------------------------------------------ #
    # Request primitives
    # ------------------------------------------------------------------ #

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Send a GET request to the store API.

        Args:
            path: Path of the request relative to :attr:`store_url`.
            params: Query string parameters.

        Example::

            # Gets the categories whose parent category is 1
            client.get("categories", {"parent": 1})

        Returns:
            The decoded :class:`~ecwid_api.client.response.ApiResponse`.

        Raises:
            TransportError: On network / timeout errors.
            DecodeError: If a JSON response body cannot be parsed.
        """
        return self._connection_for_request().get(path, params)

    def post(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Send a POST request to the store API.

        Args:
            path: Path of the request relative to :attr:`store_url`.
            params: Parameters form-urlencoded into the request body.

        Returns:
            The decoded :class:`~ecwid_api.client.response.ApiResponse`.

        Raises:
            TransportError: On network / timeout errors.
            DecodeError: If a JSON response body cannot be parsed.
        """
        return self._connection_for_request().post(path, params)

    # ------------------------------------------------------------------ #
    # Resource clients
    # ------------------------------------------------------------------ #

    @property
    def categories(self) -> CategoryApi:
        """The Category API."""
        with self._lock:
            if self._categories is None:
                from ecwid_api.api.categories import CategoryApi

                self._categories = CategoryApi(self)
            return self._categories

    @property
    def orders(self) -> OrderApi:
        """The Order API."""
        with self._lock:
            if self._orders is None:
                from ecwid_api.api.orders import OrderApi

                self._orders = OrderApi(self)
            return self._orders

    @property
    def products(self) -> ProductApi:
        """The Product API."""
        with self._lock:
            if self._products is None:
                from ecwid_api.api.products import ProductApi

                self._products = ProductApi(self)
            return self._products

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _connection_for_request(self) -> Connection:
        """Return the cached connection, resolving one for the current store URL if needed."""
        with self._lock:
            if self._connection is None:
                self._connection = resolve_connection(
                    self.store_url,
                    self.request_config,
                    self._transport,
                )
            return self._connection

    def _reset_connection(self) -> None:
        """Discard the cached connection.  Caller must hold ``self._lock``."""
        if self._connection is not None:
            get_output().debug(f"Discarding connection for {self._connection.store_url}")
            self._connection.close()
            self._connection = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(store_id={self._store_id!r}, base_url={self.base_url!r})"


def _is_blank(store_id: Optional[str]) -> bool:
    return store_id is None or not store_id.strip()
