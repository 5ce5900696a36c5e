"""Tests for ecwid_api.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ecwid_api.models import (
    DEFAULT_BASE_URL,
    Category,
    Order,
    OrderPage,
    RequestConfig,
    StoreConfig,
)


class TestStoreConfig:
    def test_defaults(self) -> None:
        config = StoreConfig(store_id="12345")
        assert config.base_url is None
        assert config.effective_base_url == DEFAULT_BASE_URL
        assert config.store_url == "https://app.ecwid.com/api/v1/12345"
        assert config.request == RequestConfig(timeout=30, verify_ssl=True)

    def test_custom_base_url(self) -> None:
        config = StoreConfig(store_id="1", base_url="http://localhost:8080/api/v1")
        assert config.store_url == "http://localhost:8080/api/v1/1"

    def test_empty_base_url_is_not_the_default(self) -> None:
        config = StoreConfig(store_id="1", base_url="")
        assert config.effective_base_url == ""
        assert config.store_url == "/1"

    @pytest.mark.parametrize("store_id", ["", "   "])
    def test_blank_store_id_rejected(self, store_id: str) -> None:
        with pytest.raises(ValidationError, match="store_id is required"):
            StoreConfig(store_id=store_id)

    def test_integer_store_id(self) -> None:
        assert StoreConfig(store_id=12345).store_id == "12345"

    def test_frozen(self) -> None:
        config = StoreConfig(store_id="1")
        with pytest.raises(ValidationError):
            config.store_id = "2"


class TestEntities:
    def test_aliases_and_field_names(self) -> None:
        by_alias = Category.model_validate({"id": 2, "parentId": 1, "productCount": 3})
        by_name = Category(id=2, parent_id=1, product_count=3)
        assert by_alias.parent_id == by_name.parent_id == 1
        assert by_alias.product_count == 3
        assert not by_alias.is_root

    def test_unknown_fields_kept(self) -> None:
        order = Order.model_validate({"number": 1, "shippingPerson": {"name": "Ann"}})
        assert order.model_extra == {"shippingPerson": {"name": "Ann"}}
        assert order.items == []

    def test_empty_order_page(self) -> None:
        page = OrderPage.model_validate({})
        assert page.total == 0
        assert page.next_url is None
        assert page.orders == []
