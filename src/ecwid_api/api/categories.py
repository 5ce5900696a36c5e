"""Category API."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ecwid_api.api.base import ResourceApi, entity_id, parse_list
from ecwid_api.models import Category


class CategoryApi(ResourceApi):
    """Read access to the store's category tree.

    Example::

        for category in client.categories.root():
            children = client.categories.children(category)
    """

    def all(self, params: Optional[Mapping[str, Any]] = None) -> list[Category]:
        """Return the categories matching *params* (all categories when empty)."""
        return parse_list(Category, self._get_json("categories", params))

    def root(self, params: Optional[Mapping[str, Any]] = None) -> list[Category]:
        """Return the top-level categories."""
        return self.all({**(params or {}), "parent": 0})

    def children(
        self,
        category: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> list[Category]:
        """Return the direct sub-categories of *category* (a :class:`Category` or an id)."""
        return self.all({**(params or {}), "parent": entity_id(category)})

    def find(self, category_id: int) -> Optional[Category]:
        """Return the category with *category_id*, or ``None`` if it does not exist."""
        data = self._find_json("category", {"id": category_id})
        if not data:
            return None
        return Category.model_validate(data)

    def parent_of(self, category: Category) -> Optional[Category]:
        """Return the parent of *category*, or ``None`` for a root category."""
        if category.is_root:
            return None
        return self.find(category.parent_id)
