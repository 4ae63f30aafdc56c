"""Unit tests for the product catalog gateway.

The HTTP client is exercised against ``httpx.MockTransport`` so no
network traffic leaves the test process.
"""

from __future__ import annotations

from decimal import Decimal

import httpx
import pytest
from django.test import override_settings

from modules.catalog.gateway import (
    CatalogUnavailable,
    HttpProductCatalog,
    InMemoryProductCatalog,
    Product,
    ProductNotFound,
    get_product_catalog,
    memory_catalog,
)

pytestmark = pytest.mark.unit

BASE_URL = "http://catalog.test/api"

PRODUCT_PAYLOAD = {
    "id": "1bf0f365-fbdd-4e21-9786-da459d78dd1f",
    "title": "Cadeira para Auto Iseos Bébé Confort Earth Brown",
    "price": 1699.0,
    "brand": "bébé confort",
    "image": "http://challenge-api.luizalabs.com/images/1bf0f365.jpg",
    "reviewScore": 4.35,
}


def _catalog(handler) -> HttpProductCatalog:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpProductCatalog(BASE_URL, timeout=1.0, client=client)


# ===========================================================================
# HttpProductCatalog
# ===========================================================================


class TestHttpProductCatalog:
    def test_found(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=PRODUCT_PAYLOAD)

        product = _catalog(handler).get_product(PRODUCT_PAYLOAD["id"])

        assert seen == [f"{BASE_URL}/product/{PRODUCT_PAYLOAD['id']}/"]
        assert product.id == PRODUCT_PAYLOAD["id"]
        assert product.price == Decimal("1699.0")
        assert product.review_score == 4.35
        assert product.brand == "bébé confort"

    def test_trailing_slash_in_base_url(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json={"id": "p1"})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        HttpProductCatalog(BASE_URL + "/", client=client).get_product("p1")

        assert seen == ["/api/product/p1/"]

    def test_not_found_returns_none(self):
        catalog = _catalog(lambda request: httpx.Response(404))
        assert catalog.get_product("missing") is None

    def test_resolve_raises_product_not_found(self):
        catalog = _catalog(lambda request: httpx.Response(404))
        with pytest.raises(ProductNotFound, match="Product not found!"):
            catalog.resolve("missing")

    def test_server_error_raises_unavailable(self):
        catalog = _catalog(lambda request: httpx.Response(502))
        with pytest.raises(CatalogUnavailable):
            catalog.get_product("p1")

    def test_transport_error_raises_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CatalogUnavailable):
            _catalog(handler).get_product("p1")

    def test_malformed_body_raises_unavailable(self):
        catalog = _catalog(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(CatalogUnavailable):
            catalog.get_product("p1")

    def test_payload_without_id_raises_unavailable(self):
        catalog = _catalog(lambda request: httpx.Response(200, json={"title": "x"}))
        with pytest.raises(CatalogUnavailable):
            catalog.get_product("p1")


# ===========================================================================
# Product payload mapping
# ===========================================================================


class TestProductFromPayload:
    def test_optional_fields_default(self):
        product = Product.from_payload({"id": 7})
        assert product.id == "7"
        assert product.price is None
        assert product.review_score is None
        assert product.title == ""

    def test_unparseable_price_is_dropped(self):
        assert Product.from_payload({"id": "p1", "price": "n/a"}).price is None


# ===========================================================================
# InMemoryProductCatalog / factory
# ===========================================================================


class TestInMemoryProductCatalog:
    def test_lookup(self):
        catalog = InMemoryProductCatalog([Product(id="p1", title="Mesa")])
        assert catalog.resolve("p1").title == "Mesa"
        assert catalog.get_product("p2") is None

    def test_clear(self):
        catalog = InMemoryProductCatalog([Product(id="p1")])
        catalog.clear()
        assert catalog.get_product("p1") is None


class TestGetProductCatalog:
    def test_memory_backend_in_tests(self):
        assert get_product_catalog() is memory_catalog

    @override_settings(
        PRODUCT_CATALOG_BACKEND="http",
        PRODUCT_CATALOG_URL=BASE_URL,
        PRODUCT_CATALOG_TIMEOUT=2.5,
    )
    def test_http_backend(self):
        catalog = get_product_catalog()
        assert isinstance(catalog, HttpProductCatalog)
