"""Favorite product domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DuplicateConstraint

ALREADY_FAVORITED_MESSAGE = (
    "The product already exists on the customers favorite list!"
)


class AlreadyFavorited(DuplicateConstraint):
    """The customer has already favorited this product."""
