"""Order API.

Every Order API call is authenticated with the store's
``order_secret_key``, sent as the ``secure_auth_key`` parameter.  Calls made
without a key fail with :class:`~ecwid_api.exceptions.ConfigurationError`
before any request is sent.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ecwid_api.api.base import ResourceApi
from ecwid_api.exceptions import ConfigurationError, DecodeError
from ecwid_api.models import Order, OrderPage


class OrderApi(ResourceApi):
    """Query and update store orders."""

    def all(self, params: Optional[Mapping[str, Any]] = None) -> OrderPage:
        """Return one page of orders matching *params*.

        Common filters are ``date``, ``from_date``, ``to_date``,
        ``payment_status``, ``fulfillment_status``, ``offset`` and ``limit``.
        Follow :attr:`~ecwid_api.models.OrderPage.next_url` to read further
        pages.
        """
        data = self._get_json("orders", self._with_key(params))
        return OrderPage.model_validate(data or {})

    def find(self, order_number: int) -> Optional[Order]:
        """Return the order with *order_number*, or ``None`` if there is none."""
        page = self.all({"order": order_number})
        return page.orders[0] if page.orders else None

    def update(
        self,
        order_number: int,
        payment_status: Optional[str] = None,
        fulfillment_status: Optional[str] = None,
        **extra: Any,
    ) -> dict[str, Any]:
        """Change the payment and/or fulfillment status of an order.

        Args:
            order_number: The order to update.
            payment_status: New payment status (e.g. ``"PAID"``).
            fulfillment_status: New fulfillment status (e.g. ``"SHIPPED"``).
            **extra: Additional update parameters passed through verbatim.

        Returns:
            The decoded JSON object of the API's reply (empty for an empty body).

        Raises:
            DecodeError: If the reply is JSON but not an object.
        """
        params: dict[str, Any] = {"order": order_number}
        if payment_status is not None:
            params["new_payment_status"] = payment_status
        if fulfillment_status is not None:
            params["new_fulfillment_status"] = fulfillment_status
        params.update(extra)
        data = self._post_json("orders", self._with_key(params))
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object from order update, got {type(data).__name__}",
                method="POST",
                url=f"{self.client.store_url}/orders",
            )
        return data

    def _with_key(self, params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        key = self.client.order_secret_key
        if not key:
            raise ConfigurationError("order_secret_key is required for the Order API")
        return {**(params or {}), "secure_auth_key": key}
