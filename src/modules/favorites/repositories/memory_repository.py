"""In-memory implementation of the Favorite repository.

Enforces the (customer, product) unique constraint like the database
does, so ``FavoriteService`` can be tested without the ORM.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from django.utils import timezone

from modules.core.exceptions import DuplicateRecord
from modules.favorites.models import CustomerFavoriteProduct
from modules.favorites.repositories.interfaces import IFavoriteRepository


class FavoriteMemoryRepository(IFavoriteRepository):
    def __init__(self) -> None:
        self._rows: Dict[str, CustomerFavoriteProduct] = {}

    def get_by_id(self, id: str) -> Optional[CustomerFavoriteProduct]:
        return self._rows.get(str(id))

    def get_by_pair(
        self, customer_id: str, product_id: str
    ) -> Optional[CustomerFavoriteProduct]:
        for link in self._rows.values():
            if str(link.customer_id) == str(customer_id) and link.product_id == str(
                product_id
            ):
                return link
        return None

    def list_for_customer(
        self, customer_id: str, offset: int, limit: int
    ) -> List[CustomerFavoriteProduct]:
        links = [
            link
            for link in self._rows.values()
            if str(link.customer_id) == str(customer_id)
        ]
        return links[offset : offset + limit]

    def count_for_customer(self, customer_id: str) -> int:
        return len(self.list_for_customer(customer_id, 0, len(self._rows)))

    def add(self, entity: CustomerFavoriteProduct) -> CustomerFavoriteProduct:
        if self.get_by_pair(entity.customer_id, entity.product_id):
            raise DuplicateRecord(f"Product {entity.product_id} already favorited.")
        entity.created_at = timezone.now()
        self._rows[str(entity.id)] = entity
        return entity

    def delete(self, id: str) -> bool:
        return self._rows.pop(str(id), None) is not None

    def delete_by_pair(self, customer_id: str, product_id: str) -> int:
        link = self.get_by_pair(customer_id, product_id)
        if link is None:
            return 0
        del self._rows[str(link.id)]
        return 1
