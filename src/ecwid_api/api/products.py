"""Product API."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ecwid_api.api.base import ResourceApi, entity_id, parse_list
from ecwid_api.models import Product


class ProductApi(ResourceApi):
    """Read access to the store's catalog.

    When the store client carries a ``product_secret_key`` it is sent with
    every request as ``secure_auth_key``.
    """

    def all(self, params: Optional[Mapping[str, Any]] = None) -> list[Product]:
        """Return the products matching *params*."""
        return parse_list(Product, self._get_json("products", self._with_key(params)))

    def in_category(
        self,
        category: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> list[Product]:
        """Return the products of *category* (a :class:`~ecwid_api.models.Category` or an id)."""
        return self.all({**(params or {}), "category": entity_id(category)})

    def find(self, product_id: int) -> Optional[Product]:
        """Return the product with *product_id*, or ``None`` if it does not exist."""
        data = self._find_json("product", self._with_key({"id": product_id}))
        if not data:
            return None
        return Product.model_validate(data)

    def _with_key(self, params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        merged = dict(params or {})
        key = self.client.product_secret_key
        if key:
            merged.setdefault("secure_auth_key", key)
        return merged
