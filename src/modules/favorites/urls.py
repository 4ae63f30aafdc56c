"""Favorite product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.favorites.views import (
    CustomerFavoriteListView,
    CustomerFavoriteProductView,
)

urlpatterns = [
    path(
        "customers/<str:customer_id>/products/<str:product_id>/favorites",
        CustomerFavoriteProductView.as_view(),
        name="customer-favorite-product",
    ),
    path(
        "customers/<str:customer_id>/favorites",
        CustomerFavoriteListView.as_view(),
        name="customer-favorite-list",
    ),
]
