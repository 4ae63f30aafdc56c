"""Integration tests for the Customer API endpoints."""

from __future__ import annotations

import uuid

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.customers.models import Customer

pytestmark = pytest.mark.integration

User = get_user_model()

BASE_URL = "/customers"


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = User.objects.create_user(username="customer_api", password="testpass123")
    client.force_authenticate(user=user)
    return client


def _create(client, **overrides):
    payload = {"name": "Ana", "email": "ana@x.com", "password": "secret123"}
    payload.update(overrides)
    return client.post(BASE_URL, payload, format="json")


# ===========================================================================
# POST /customers
# ===========================================================================


class TestCreateCustomer:
    def test_creates_customer(self, auth_client):
        response = _create(auth_client)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Ana"
        assert data["email"] == "ana@x.com"
        assert uuid.UUID(data["id"])
        assert "password" not in data
        assert Customer.objects.filter(email="ana@x.com").exists()

    def test_password_stored_hashed(self, auth_client):
        _create(auth_client)
        customer = Customer.objects.get(email="ana@x.com")
        assert customer.password != "secret123"
        assert customer.check_password("secret123")

    def test_password_is_optional(self, auth_client):
        response = _create(auth_client, password=None)
        assert response.status_code == 201

    def test_duplicate_email(self, auth_client):
        _create(auth_client)

        response = _create(auth_client, name="Ana 2")

        assert response.status_code == 400
        assert response.json() == {"error": True, "message": "Duplicated email"}
        assert Customer.objects.count() == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "ana@x.com"},
            {"name": "   ", "email": "ana@x.com"},
            {"name": "Ana", "email": "not-an-email"},
            {"name": "Ana"},
        ],
    )
    def test_invalid_payload(self, auth_client, payload):
        response = auth_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        data = response.json()
        assert data["error"] is True
        assert data["message"] == "Error registering customer"
        assert data["details"]
        assert Customer.objects.count() == 0

    def test_name_longer_than_column(self, auth_client):
        response = _create(auth_client, name="a" * 256)

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Error registering customer"
        assert any(detail.startswith("name:") for detail in data["details"])
        assert Customer.objects.count() == 0

    def test_non_object_body(self, auth_client):
        response = auth_client.post(BASE_URL, ["Ana"], format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "Error registering customer"


# ===========================================================================
# GET /customers/{id}
# ===========================================================================


class TestRetrieveCustomer:
    def test_found(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.get(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["email"] == "ana@x.com"

    def test_unknown_id(self, auth_client):
        response = auth_client.get(f"{BASE_URL}/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": True, "message": "Customer not found!"}

    def test_malformed_id(self, auth_client):
        response = auth_client.get(f"{BASE_URL}/not-a-uuid")
        assert response.status_code == 404


# ===========================================================================
# PUT / PATCH /customers/{id}
# ===========================================================================


class TestUpdateCustomer:
    def test_put_updates(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.put(
            f"{BASE_URL}/{created['id']}",
            {"name": "Ana Maria", "email": "am@x.com"},
            format="json",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ana Maria"
        assert data["email"] == "am@x.com"

    def test_patch_partial(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.patch(
            f"{BASE_URL}/{created['id']}", {"name": "Bia"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["email"] == "ana@x.com"

    def test_keep_own_email(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.put(
            f"{BASE_URL}/{created['id']}",
            {"name": "Ana", "email": "ana@x.com"},
            format="json",
        )

        assert response.status_code == 200

    def test_email_taken_by_other_customer(self, auth_client):
        _create(auth_client, email="taken@x.com")
        created = _create(auth_client).json()

        response = auth_client.put(
            f"{BASE_URL}/{created['id']}", {"email": "taken@x.com"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Duplicated email"

    def test_invalid_email(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.put(
            f"{BASE_URL}/{created['id']}", {"email": "nope"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Error updating customer"

    def test_name_longer_than_column(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.patch(
            f"{BASE_URL}/{created['id']}", {"name": "a" * 256}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Error updating customer"

    def test_unknown_id(self, auth_client):
        response = auth_client.put(
            f"{BASE_URL}/{uuid.uuid4()}", {"name": "X"}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Customer not found!"


# ===========================================================================
# DELETE /customers/{id}
# ===========================================================================


class TestDestroyCustomer:
    def test_deletes(self, auth_client):
        created = _create(auth_client).json()

        response = auth_client.delete(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert not Customer.objects.filter(id=created["id"]).exists()

    def test_second_delete_is_404(self, auth_client):
        created = _create(auth_client).json()
        auth_client.delete(f"{BASE_URL}/{created['id']}")

        response = auth_client.delete(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 404
        assert response.json()["message"] == "Customer not found!"


# ===========================================================================
# End-to-end flow
# ===========================================================================


class TestCustomerLifecycle:
    def test_create_read_update_delete(self, auth_client):
        created = _create(auth_client)
        assert created.status_code == 201
        customer_id = created.json()["id"]

        assert auth_client.get(f"{BASE_URL}/{customer_id}").status_code == 200

        listing = auth_client.get(BASE_URL).json()
        assert listing["total"] == 1
        assert listing["data"][0]["id"] == customer_id

        updated = auth_client.put(
            f"{BASE_URL}/{customer_id}", {"name": "Ana B"}, format="json"
        )
        assert updated.json()["name"] == "Ana B"

        assert auth_client.delete(f"{BASE_URL}/{customer_id}").status_code == 200
        assert auth_client.get(f"{BASE_URL}/{customer_id}").status_code == 404
        assert auth_client.get(BASE_URL).json()["total"] == 0
