"""In-memory implementation of the Customer repository.

Keeps ``Customer`` snapshots in an insertion-ordered dict and enforces
the email unique index the same way the database does, so services can
be exercised without the ORM.  Rows are copied on the way in and out:
callers mutating a returned instance never touch the stored row until
``save`` succeeds.
"""

from __future__ import annotations

import copy
from typing import Dict, List, Optional

from django.utils import timezone

from modules.core.exceptions import DuplicateRecord
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class CustomerMemoryRepository(ICustomerRepository):
    def __init__(self) -> None:
        self._rows: Dict[str, Customer] = {}

    def get_by_id(self, id: str) -> Optional[Customer]:
        row = self._rows.get(str(id))
        return copy.copy(row) if row is not None else None

    def get_by_email(
        self, email: str, exclude_id: Optional[str] = None
    ) -> Optional[Customer]:
        excluded = str(exclude_id) if exclude_id is not None else None
        for key, customer in self._rows.items():
            if key != excluded and customer.email == email:
                return copy.copy(customer)
        return None

    def list(self, offset: int, limit: int) -> List[Customer]:
        rows = list(self._rows.values())[offset : offset + limit]
        return [copy.copy(row) for row in rows]

    def count(self) -> int:
        return len(self._rows)

    def add(self, entity: Customer) -> Customer:
        self._check_unique(entity)
        now = timezone.now()
        entity.created_at = now
        entity.updated_at = now
        self._rows[str(entity.id)] = copy.copy(entity)
        return entity

    def save(self, entity: Customer) -> Customer:
        self._check_unique(entity)
        entity.updated_at = timezone.now()
        self._rows[str(entity.id)] = copy.copy(entity)
        return entity

    def delete(self, id: str) -> bool:
        return self._rows.pop(str(id), None) is not None

    def _check_unique(self, entity: Customer) -> None:
        if self.get_by_email(entity.email, exclude_id=str(entity.id)):
            raise DuplicateRecord(f"Email {entity.email} already stored.")
