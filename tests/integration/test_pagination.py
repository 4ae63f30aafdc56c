"""Integration tests for the paginated listing envelope."""

from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.customers.models import Customer

pytestmark = pytest.mark.integration

User = get_user_model()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = User.objects.create_user(username="pagination_user", password="testpass123")
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def customer_batch():
    """Create customers one by one so insertion order is observable."""
    customers = []
    for idx in range(1, 26):
        customer = Customer(name=f"Customer {idx:03d}", email=f"c{idx:03d}@example.com")
        customer.set_password(None)
        customer.save()
        customers.append(customer)
    return customers


class TestPagination:
    def test_default_page(self, auth_client, customer_batch):
        response = auth_client.get("/customers")

        assert response.status_code == 200
        data = response.json()
        assert len(data["data"]) == 10
        assert data["page"] == 1
        assert data["perPage"] == 10
        assert data["lastPage"] == 3
        assert data["total"] == 25
        assert data["data"][0]["name"] == "Customer 001"

    def test_custom_page_and_size(self, auth_client, customer_batch):
        response = auth_client.get("/customers?page=2&perPage=5")

        data = response.json()
        assert [c["name"] for c in data["data"]] == [
            f"Customer {idx:03d}" for idx in range(6, 11)
        ]
        assert data["page"] == 2
        assert data["perPage"] == 5
        assert data["lastPage"] == 5

    def test_last_partial_page(self, auth_client, customer_batch):
        data = auth_client.get("/customers?page=3").json()
        assert len(data["data"]) == 5
        assert data["page"] == 3
        assert data["perPage"] == 10
        assert data["data"][-1]["name"] == "Customer 025"

    def test_page_beyond_last_is_empty(self, auth_client, customer_batch):
        data = auth_client.get("/customers?page=99").json()
        assert data["data"] == []
        assert data["page"] == 99
        assert data["total"] == 25

    @pytest.mark.parametrize("query", ["page=abc&perPage=xyz", "page=0&perPage=-3"])
    def test_invalid_params_use_defaults(self, auth_client, customer_batch, query):
        response = auth_client.get(f"/customers?{query}")

        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["perPage"] == 10

    def test_per_page_is_capped(self, auth_client, customer_batch):
        data = auth_client.get("/customers?perPage=1000").json()
        assert data["perPage"] == 100
        assert len(data["data"]) == 25

    def test_empty_listing(self, auth_client):
        data = auth_client.get("/customers").json()
        assert data == {"data": [], "page": 1, "perPage": 10, "lastPage": 1, "total": 0}

    def test_page_only(self, auth_client, customer_batch):
        data = auth_client.get("/customers?page=2").json()

        assert data["page"] == 2
        assert data["perPage"] == 10
        assert data["data"][0]["name"] == "Customer 011"
        assert len(data["data"]) == 10

    def test_per_page_only(self, auth_client, customer_batch):
        data = auth_client.get("/customers?perPage=5").json()

        assert data["page"] == 1
        assert data["perPage"] == 5
        assert len(data["data"]) == 5
        assert data["lastPage"] == 5

    def test_huge_page_is_empty_not_an_error(self, auth_client, customer_batch):
        response = auth_client.get("/customers?page=99999999999999999999")

        assert response.status_code == 200
        data = response.json()
        assert data["data"] == []
        assert data["total"] == 25
        assert data["lastPage"] == 3
