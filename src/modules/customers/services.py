"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Email must be unique.  The look-up before each write produces the
  ``DuplicateEmail`` error in the common case; a concurrent writer that
  slips past it is caught by the storage unique index, surfaced by the
  repository as ``DuplicateRecord`` and mapped to the same error.
- Any other integrity failure while registering is ``RegistrationFailed``.
- Listing is offset-paginated with defaulted ``page`` / ``perPage``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import DuplicateRecord
from modules.core.pagination import Page, PageRequest
from modules.customers.exceptions import (
    CUSTOMER_NOT_FOUND_MESSAGE,
    DUPLICATED_EMAIL_MESSAGE,
    REGISTRATION_FAILED_MESSAGE,
    CustomerNotFound,
    DuplicateEmail,
    RegistrationFailed,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def store(self, dto: CreateCustomerDTO) -> Customer:
        """Register a new customer.

        Raises:
            DuplicateEmail: the email is already taken.
            RegistrationFailed: storage rejected the insert for another reason.
        """
        log = logger.bind(email=dto.email)

        if self._repo.get_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise DuplicateEmail(DUPLICATED_EMAIL_MESSAGE)

        customer = Customer(name=dto.name, email=dto.email)
        customer.set_password(dto.password)

        try:
            customer = self._repo.add(customer)
        except DuplicateRecord as exc:
            log.warning("customer.duplicate_email", concurrent=True)
            raise DuplicateEmail(DUPLICATED_EMAIL_MESSAGE) from exc
        except IntegrityError as exc:
            log.error("customer.registration_failed", error=str(exc))
            raise RegistrationFailed(REGISTRATION_FAILED_MESSAGE) from exc

        log.info("customer.created", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def update(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Apply the supplied fields to an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            DuplicateEmail: if the new email belongs to another customer.
        """
        customer = self._get_or_raise(id)
        log = logger.bind(customer_id=str(customer.id))

        if dto.email is not None and self._repo.get_by_email(
            dto.email, exclude_id=str(customer.id)
        ):
            log.warning("customer.duplicate_email", email=dto.email)
            raise DuplicateEmail(DUPLICATED_EMAIL_MESSAGE)

        if dto.name is not None:
            customer.name = dto.name
        if dto.email is not None:
            customer.email = dto.email
        if dto.password is not None:
            customer.set_password(dto.password)

        try:
            customer = self._repo.save(customer)
        except DuplicateRecord as exc:
            log.warning("customer.duplicate_email", concurrent=True)
            raise DuplicateEmail(DUPLICATED_EMAIL_MESSAGE) from exc

        log.info("customer.updated")
        return customer

    @transaction.atomic
    def destroy(self, id: str) -> None:
        """Delete a customer permanently.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_or_raise(id)
        self._repo.delete(str(customer.id))
        logger.info("customer.destroyed", customer_id=str(customer.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def show(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_or_raise(id)
        logger.info("customer.retrieved", customer_id=str(customer.id))
        return customer

    def index(self, page: Any = None, per_page: Any = None) -> Page[Customer]:
        """Return one page of customers in insertion order."""
        request = PageRequest.from_query(page, per_page)
        total = self._repo.count()
        items = (
            self._repo.list(request.offset, request.limit)
            if request.reaches(total)
            else []
        )
        return Page(
            items=items,
            page=request.page,
            per_page=request.per_page,
            total=total,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Customer:
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(CUSTOMER_NOT_FOUND_MESSAGE)
        return customer
