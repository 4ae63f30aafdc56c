from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

from modules.customers.models import Customer
from modules.favorites.models import CustomerFavoriteProduct

pytestmark = pytest.mark.unit


class TestSeedDataCommand:
    def test_seeds_users_customers_and_favorites(self):
        out = StringIO()
        call_command("seed_data", stdout=out)

        assert get_user_model().objects.filter(username="api").exists()
        assert Customer.objects.count() == 10
        assert "Seed completed" in out.getvalue()

    def test_is_rerunnable(self):
        call_command("seed_data", stdout=StringIO())
        favorites = CustomerFavoriteProduct.objects.count()

        call_command("seed_data", stdout=StringIO())

        assert Customer.objects.count() == 10
        assert get_user_model().objects.filter(username="api").count() == 1
        assert CustomerFavoriteProduct.objects.count() == favorites
