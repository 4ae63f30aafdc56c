"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for partial customer updates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# Matches the ``customers.name`` column
NAME_MAX_LENGTH = 255


def _strip_required(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("must not be empty.")
    return v.strip()


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``name`` is present, not blank and fits the column.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``).
    - ``password`` is optional; when omitted the customer gets an
      unusable credential.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: EmailStr
    password: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("password")
    @classmethod
    def password_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("must not be empty.")
        return v


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied fields are updated.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: EmailStr | None = None
    password: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _strip_required(v)

    @field_validator("password")
    @classmethod
    def password_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("must not be empty.")
        return v
