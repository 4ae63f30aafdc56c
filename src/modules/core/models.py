"""Base abstract models shared by every module.

Provides:
- ``BaseModel``: UUIDv7 primary key + ``created_at`` timestamp.
- ``TimestampedModel``: extends BaseModel with ``updated_at`` for
  mutable records.

UUIDv7 keys are time ordered, so ``("created_at", "id")`` is a stable
insertion-order key for offset pagination.
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and creation timestamp."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True


class TimestampedModel(BaseModel):
    """Abstract base for records that are updated after creation."""

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
