"""Pydantic models shared across ecwid_api.

The models fall into two groups:

**Configuration models** -- describe how to reach a store:
    :class:`RequestConfig` and :class:`StoreConfig`.

**Entity models** -- lenient views of the JSON documents returned by the
Ecwid API: :class:`Category`, :class:`Product`, :class:`OrderItem`,
:class:`Order`, and :class:`OrderPage`.

Entity models accept the API's camelCase keys (``parentId``) as well as
snake_case field names, and keep any field they do not declare in
``model_extra`` so nothing returned by the API is lost.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://app.ecwid.com/api/v1"
"""Base URL of the Ecwid API used when none is configured."""


# --- Configuration Models ---


class RequestConfig(BaseModel):
    """HTTP transport settings applied to every request of a store client."""

    timeout: float = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class StoreConfig(BaseModel):
    """Identity and credentials for one Ecwid store.

    Instances are immutable; build a new one (or use ``model_copy(update=...)``)
    to describe a different store.

    Example::

        StoreConfig(
            store_id="12345",
            order_secret_key="ORDER_SECRET_KEY",
        )
    """

    model_config = ConfigDict(frozen=True)

    store_id: str = Field(description="Ecwid store identifier")
    base_url: Optional[str] = Field(
        default=None, description="Override the default Ecwid API URL"
    )
    order_secret_key: Optional[str] = Field(
        default=None, description="Secret key for the Order API"
    )
    product_secret_key: Optional[str] = Field(
        default=None, description="Secret key for the Product API"
    )
    request: RequestConfig = Field(default_factory=RequestConfig)

    @field_validator("store_id", mode="before")
    @classmethod
    def _coerce_store_id(cls, value: object) -> object:
        # Store ids are numeric on the platform but travel as strings.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("store_id")
    @classmethod
    def _require_store_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("store_id is required")
        return value

    @property
    def effective_base_url(self) -> str:
        """The configured base URL, or :data:`DEFAULT_BASE_URL`."""
        return self.base_url if self.base_url is not None else DEFAULT_BASE_URL

    @property
    def store_url(self) -> str:
        """The URL of the API for this store (``{base_url}/{store_id}``)."""
        return f"{self.effective_base_url}/{self.store_id}"


# --- Entity Models ---


class _Entity(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Category(_Entity):
    """A store category.  Root categories have no ``parent_id``."""

    id: int
    parent_id: Optional[int] = Field(default=None, alias="parentId")
    name: str = ""
    url: Optional[str] = None
    product_count: Optional[int] = Field(default=None, alias="productCount")
    thumbnail_url: Optional[str] = Field(default=None, alias="thumbnailUrl")
    description: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return not self.parent_id


class Product(_Entity):
    """A catalog product."""

    id: int
    sku: Optional[str] = None
    name: str = ""
    price: Optional[float] = None
    url: Optional[str] = None
    quantity: Optional[int] = None
    unlimited: Optional[bool] = None
    enabled: Optional[bool] = None


class OrderItem(_Entity):
    """A line item of an :class:`Order`."""

    product_id: Optional[int] = Field(default=None, alias="productId")
    sku: Optional[str] = None
    name: str = ""
    price: Optional[float] = None
    quantity: int = 0


class Order(_Entity):
    """A store order as returned by the Order API."""

    number: int
    vendor_number: Optional[str] = Field(default=None, alias="vendorNumber")
    created: Optional[str] = None
    email: Optional[str] = None
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")
    fulfillment_status: Optional[str] = Field(default=None, alias="fulfillmentStatus")
    total: Optional[float] = None
    items: list[OrderItem] = Field(default_factory=list)


class OrderPage(_Entity):
    """One page of orders.

    ``next_url`` is the API-provided link to the following page, or ``None``
    on the last page.
    """

    total: int = 0
    count: int = 0
    next_url: Optional[str] = Field(default=None, alias="nextUrl")
    orders: list[Order] = Field(default_factory=list)
