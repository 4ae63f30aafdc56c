"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import DuplicateConstraint, NotFound

CUSTOMER_NOT_FOUND_MESSAGE = "Customer not found!"
DUPLICATED_EMAIL_MESSAGE = "Duplicated email"
REGISTRATION_FAILED_MESSAGE = "Error registering customer"


class CustomerNotFound(NotFound):
    """No customer exists with the requested identifier."""


class DuplicateEmail(DuplicateConstraint):
    """Another customer already uses this email address."""


class RegistrationFailed(Exception):
    """The insert was rejected by storage for a reason other than the email index."""
