"""Resource clients built on the store client's ``get``/``post`` primitives.

Classes:
    :class:`CategoryApi` -- category tree lookups.
    :class:`OrderApi` -- order queries and status updates.
    :class:`ProductApi` -- catalog lookups.

Resource clients are not normally constructed directly; use the
``categories``, ``orders`` and ``products`` properties of
:class:`~ecwid_api.client.store_client.StoreClient`.
"""

from ecwid_api.api.base import ResourceApi
from ecwid_api.api.categories import CategoryApi
from ecwid_api.api.orders import OrderApi
from ecwid_api.api.products import ProductApi

__all__ = ["ResourceApi", "CategoryApi", "OrderApi", "ProductApi"]
