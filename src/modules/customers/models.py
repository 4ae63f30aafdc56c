"""Customer model.

Business rules implemented:
- Email must be unique in the system (DB unique index; the service
  pre-check only produces the friendlier error in the common case).
- The credential is stored only as a derived hash (Django hasher format).
- Deletion is physical; favorite links are removed by the ORM cascade.
"""

from __future__ import annotations

from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from modules.core.models import TimestampedModel


class Customer(TimestampedModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    password = models.CharField(max_length=128)

    class Meta:
        db_table = "customers"
        ordering = ["created_at", "id"]

    # ------------------------------------------------------------------
    # Credential
    # ------------------------------------------------------------------

    def set_password(self, raw_password: str | None) -> None:
        """Hash and store ``raw_password``; ``None`` stores an unusable hash."""
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
