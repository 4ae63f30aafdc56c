"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.

Writes run inside their own ``transaction.atomic()`` block so that a
unique-index violation only rolls back to a savepoint and the caller's
transaction stays usable for the follow-up look-up.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.core.exceptions import DuplicateRecord
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_email(
        self, email: str, exclude_id: Optional[str] = None
    ) -> Optional[Customer]:
        """Retrieve a customer by email address."""
        queryset = Customer.objects.filter(email=email)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.first()

    def list(self, offset: int, limit: int) -> List[Customer]:
        queryset = Customer.objects.order_by("created_at", "id")
        return list(queryset[offset : offset + limit])

    def count(self) -> int:
        return Customer.objects.count()

    def add(self, entity: Customer) -> Customer:
        """Insert a new customer."""
        self._write(entity, force_insert=True)
        logger.info("customer.inserted", customer_id=str(entity.id))
        return entity

    def save(self, entity: Customer) -> Customer:
        """Persist changes to an existing customer."""
        self._write(entity)
        logger.info("customer.saved", customer_id=str(entity.id))
        return entity

    def delete(self, id: str) -> bool:
        """Hard-delete a customer by ID (favorite links cascade).

        Returns ``True`` if the customer was found and deleted,
        ``False`` if no customer exists with the given ID.
        """
        customer = self.get_by_id(id)
        if not customer:
            return False
        customer.delete()
        logger.info("customer.deleted", customer_id=str(id))
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(self, entity: Customer, **save_kwargs) -> None:
        try:
            with transaction.atomic():
                entity.save(**save_kwargs)
        except IntegrityError as exc:
            if self.get_by_email(entity.email, exclude_id=str(entity.id)):
                logger.warning(
                    "customer.unique_violation",
                    customer_id=str(entity.id),
                    email=entity.email,
                )
                raise DuplicateRecord(f"Email {entity.email} already stored.") from exc
            raise
