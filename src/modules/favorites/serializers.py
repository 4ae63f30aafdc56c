"""Favorite product DRF serializers for API output."""

from __future__ import annotations

from rest_framework import serializers

from modules.favorites.models import CustomerFavoriteProduct


class CustomerFavoriteProductSerializer(serializers.ModelSerializer):
    customer_id = serializers.CharField(read_only=True)

    class Meta:
        model = CustomerFavoriteProduct
        fields = ["id", "customer_id", "product_id", "created_at"]
        read_only_fields = fields
