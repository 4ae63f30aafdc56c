import pytest

from rest_framework.test import APIClient

from modules.catalog.gateway import Product, memory_catalog


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _reset_catalog():
    """The in-memory product catalog is module state; start every test empty."""
    memory_catalog.clear()
    yield
    memory_catalog.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def catalog():
    """In-memory catalog seeded with two products."""
    memory_catalog.add(Product(id="p1", title="Cadeira Gamer", brand="acme"))
    memory_catalog.add(Product(id="p2", title="Mesa Digitalizadora", brand="acme"))
    return memory_catalog
