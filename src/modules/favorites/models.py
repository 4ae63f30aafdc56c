"""Customer favorite product link.

Business rules implemented:
- A (customer, product) pair can be favorited only once
  (``favorites_customer_product_uniq`` unique constraint).
- Links are immutable: they are created and deleted, never updated.
- Deleting a customer through the ORM deletes its links
  (``on_delete=CASCADE``, run by Django's delete collector; the
  schema carries no database-level cascade).

``product_id`` is an opaque reference to the external catalog; the
product itself is not stored here.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.customers.models import Customer

PRODUCT_ID_MAX_LENGTH = 64


class CustomerFavoriteProduct(BaseModel):
    customer = models.ForeignKey(
        Customer,
        on_delete=models.CASCADE,
        related_name="favorite_products",
    )
    product_id = models.CharField(max_length=PRODUCT_ID_MAX_LENGTH)

    class Meta:
        db_table = "customer_favorite_products"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["customer", "product_id"],
                name="favorites_customer_product_uniq",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.customer_id} -> {self.product_id}"
