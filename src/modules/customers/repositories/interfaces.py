"""Customer repository interface (CustomerStore).

Extends ``IRepository[Customer]`` with the email look-up required by
the uniqueness rule and the offset/limit listing used by pagination.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_email(
        self, email: str, exclude_id: Optional[str] = None
    ) -> Optional[Customer]:
        """Retrieve a customer by email, optionally ignoring one customer."""

    @abstractmethod
    def save(self, entity: Customer) -> Customer:
        """Persist changes to an existing customer.

        Raises:
            DuplicateRecord: the new email collides at the storage level.
        """

    @abstractmethod
    def list(self, offset: int, limit: int) -> List[Customer]:
        """Return at most ``limit`` customers starting at ``offset``,
        in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Total number of customers."""
