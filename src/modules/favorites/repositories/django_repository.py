"""Django ORM implementation of the Favorite repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.core.exceptions import DuplicateRecord
from modules.favorites.models import CustomerFavoriteProduct
from modules.favorites.repositories.interfaces import IFavoriteRepository

logger = structlog.get_logger(__name__)


class FavoriteDjangoRepository(IFavoriteRepository):
    """Concrete Favorite repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[CustomerFavoriteProduct]:
        try:
            return CustomerFavoriteProduct.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_pair(
        self, customer_id: str, product_id: str
    ) -> Optional[CustomerFavoriteProduct]:
        try:
            return CustomerFavoriteProduct.objects.filter(
                customer_id=customer_id, product_id=product_id
            ).first()
        except (ValueError, ValidationError):
            return None

    def list_for_customer(
        self, customer_id: str, offset: int, limit: int
    ) -> List[CustomerFavoriteProduct]:
        queryset = CustomerFavoriteProduct.objects.filter(
            customer_id=customer_id
        ).order_by("created_at", "id")
        return list(queryset[offset : offset + limit])

    def count_for_customer(self, customer_id: str) -> int:
        return CustomerFavoriteProduct.objects.filter(customer_id=customer_id).count()

    def add(self, entity: CustomerFavoriteProduct) -> CustomerFavoriteProduct:
        """Insert a new link.

        A racing insert of the same pair trips the unique constraint; the
        savepoint is rolled back and ``DuplicateRecord`` is raised instead.
        """
        try:
            with transaction.atomic():
                entity.save(force_insert=True)
        except IntegrityError as exc:
            if self.get_by_pair(entity.customer_id, entity.product_id):
                logger.warning(
                    "favorite.unique_violation",
                    customer_id=str(entity.customer_id),
                    product_id=entity.product_id,
                )
                raise DuplicateRecord(
                    f"Product {entity.product_id} already favorited."
                ) from exc
            raise
        logger.info(
            "favorite.inserted",
            favorite_id=str(entity.id),
            customer_id=str(entity.customer_id),
            product_id=entity.product_id,
        )
        return entity

    def delete(self, id: str) -> bool:
        try:
            deleted, _ = CustomerFavoriteProduct.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        return deleted > 0

    def delete_by_pair(self, customer_id: str, product_id: str) -> int:
        deleted, _ = CustomerFavoriteProduct.objects.filter(
            customer_id=customer_id, product_id=product_id
        ).delete()
        return deleted
