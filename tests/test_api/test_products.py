"""Tests for the Product API."""

from __future__ import annotations

from conftest import RecordingTransport, json_response
from ecwid_api.client.store_client import StoreClient
from ecwid_api.models import Category

PRODUCT = {
    "id": 100,
    "sku": "SKU-100",
    "name": "Red Boots",
    "price": 49.5,
    "quantity": 3,
    "unlimited": False,
    "weight": 1.2,
}


class TestProductApi:
    def test_all_sends_secret_key(self, client: StoreClient, transport: RecordingTransport) -> None:
        transport.responder = lambda request: json_response([PRODUCT])

        products = client.products.all()

        assert transport.last.url.path == "/api/v1/12345/products"
        assert transport.last.url.params["secure_auth_key"] == "PRODUCT_SECRET_KEY"
        assert products[0].sku == "SKU-100"
        assert products[0].price == 49.5
        assert products[0].model_extra == {"weight": 1.2}

    def test_no_secret_key_sent_when_unset(self, transport: RecordingTransport) -> None:
        transport.responder = lambda request: json_response([])
        client = StoreClient(store_id="12345", transport=transport)

        client.products.all({"limit": 10})

        assert "secure_auth_key" not in transport.last.url.params
        assert transport.last.url.params["limit"] == "10"

    def test_in_category(self, client: StoreClient, transport: RecordingTransport) -> None:
        transport.responder = lambda request: json_response([PRODUCT])
        client.products.in_category(Category(id=5))
        assert transport.last.url.params["category"] == "5"

    def test_find(self, client: StoreClient, transport: RecordingTransport) -> None:
        transport.responder = lambda request: json_response(PRODUCT)

        product = client.products.find(100)

        assert transport.last.url.path == "/api/v1/12345/product"
        assert transport.last.url.params["id"] == "100"
        assert product is not None
        assert product.name == "Red Boots"

    def test_find_missing(self, client: StoreClient, transport: RecordingTransport) -> None:
        transport.responder = lambda request: json_response({}, 404)
        assert client.products.find(1) is None

    def test_secret_key_change_is_seen(self, client: StoreClient, transport: RecordingTransport) -> None:
        transport.responder = lambda request: json_response([])
        products = client.products
        client.product_secret_key = "ROTATED"
        products.all()
        assert transport.last.url.params["secure_auth_key"] == "ROTATED"
