"""Favorite repository interface (FavoriteStore).

Extends ``IRepository[CustomerFavoriteProduct]`` with the look-ups keyed
by the (customer, product) pair.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.favorites.models import CustomerFavoriteProduct


class IFavoriteRepository(IRepository["CustomerFavoriteProduct"]):
    """Repository contract for favorite product links."""

    @abstractmethod
    def get_by_pair(
        self, customer_id: str, product_id: str
    ) -> Optional[CustomerFavoriteProduct]:
        """Retrieve the link for a (customer, product) pair."""

    @abstractmethod
    def delete_by_pair(self, customer_id: str, product_id: str) -> int:
        """Delete the link for a pair. Returns the number of rows removed."""

    @abstractmethod
    def list_for_customer(
        self, customer_id: str, offset: int, limit: int
    ) -> List[CustomerFavoriteProduct]:
        """Return a customer's links in insertion order."""

    @abstractmethod
    def count_for_customer(self, customer_id: str) -> int:
        """Number of links owned by a customer."""
