"""Offset pagination for listing endpoints.

Query parameters ``page`` and ``perPage`` arrive as strings.  Anything
that is not a positive integer falls back to the configured default
(page 1, 10 per page) instead of producing a 400.  The response uses
the envelope ``{data, page, perPage, lastPage, total}``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from django.conf import settings

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


def parse_positive_int(value: Any, default: int) -> int:
    """Parse ``value`` as a positive integer, returning ``default`` otherwise.

    ``"2"`` -> 2, ``" 3 "`` -> 3; ``None``, ``""``, ``"abc"``, ``"0"``,
    ``"-1"`` and ``"2.5"`` all yield ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class PageRequest:
    """Effective pagination parameters after defaulting."""

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page

    def reaches(self, total: int) -> bool:
        """Whether this page starts inside a result set of ``total`` rows.

        Pages past the end are answered without querying rows, so an
        arbitrarily large ``page`` never turns into a database OFFSET.
        """
        return self.offset < total

    @classmethod
    def from_query(cls, page: Any = None, per_page: Any = None) -> PageRequest:
        default_page = getattr(settings, "PAGINATION_DEFAULT_PAGE", DEFAULT_PAGE)
        default_per_page = getattr(
            settings, "PAGINATION_DEFAULT_PER_PAGE", DEFAULT_PER_PAGE
        )
        max_per_page = getattr(settings, "PAGINATION_MAX_PER_PAGE", MAX_PER_PAGE)
        return cls(
            page=parse_positive_int(page, default_page),
            per_page=min(parse_positive_int(per_page, default_per_page), max_per_page),
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the numbers needed to navigate."""

    items: List[T]
    page: int
    per_page: int
    total: int

    @property
    def last_page(self) -> int:
        if self.total <= 0:
            return 1
        return math.ceil(self.total / self.per_page)

    def to_envelope(
        self, serialize: Optional[Callable[[List[T]], List[Any]]] = None
    ) -> Dict[str, Any]:
        data = serialize(self.items) if serialize else list(self.items)
        return {
            "data": data,
            "page": self.page,
            "perPage": self.per_page,
            "lastPage": self.last_page,
            "total": self.total,
        }
