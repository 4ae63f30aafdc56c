"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly, so the
same service runs against the ORM store or an in-memory store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``CustomerFavoriteProduct``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key.

        Returns ``None`` for unknown or malformed identifiers.
        """

    @abstractmethod
    def add(self, entity: T) -> T:
        """Insert a new entity.

        Raises:
            DuplicateRecord: a unique constraint rejected the row.
        """

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID. Returns ``False`` when nothing matched."""
