"""Favorite product service layer (Use Cases).

Customer and product existence is established by the callers (the
identity and product gates in the API layer); this service only owns
the link records.

Policies:
- ``store`` rejects an already favorited pair with ``AlreadyFavorited``,
  whether detected by the look-up or by the storage unique constraint.
- ``destroy`` is idempotent: removing a pair that is not favorited
  succeeds silently.  Customer deletion, by contrast, reports 404.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from django.db import transaction

from modules.core.exceptions import DuplicateRecord
from modules.core.pagination import Page, PageRequest
from modules.favorites.exceptions import ALREADY_FAVORITED_MESSAGE, AlreadyFavorited
from modules.favorites.models import CustomerFavoriteProduct

if TYPE_CHECKING:
    from modules.favorites.repositories.interfaces import IFavoriteRepository

logger = structlog.get_logger(__name__)


class FavoriteService:
    """Application service for favorite product links.

    Receives an ``IFavoriteRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IFavoriteRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def store(self, customer_id: Any, product_id: str) -> CustomerFavoriteProduct:
        """Favorite ``product_id`` for ``customer_id``.

        Raises:
            AlreadyFavorited: the pair already exists.
        """
        product_id = str(product_id)
        log = logger.bind(customer_id=str(customer_id), product_id=product_id)

        if self._repo.get_by_pair(customer_id, product_id):
            log.warning("favorite.duplicate")
            raise AlreadyFavorited(ALREADY_FAVORITED_MESSAGE)

        link = CustomerFavoriteProduct(customer_id=customer_id, product_id=product_id)
        try:
            link = self._repo.add(link)
        except DuplicateRecord as exc:
            log.warning("favorite.duplicate", concurrent=True)
            raise AlreadyFavorited(ALREADY_FAVORITED_MESSAGE) from exc

        log.info("favorite.created", favorite_id=str(link.id))
        return link

    @transaction.atomic
    def destroy(self, customer_id: Any, product_id: str) -> None:
        """Remove the pair if present; never fails when it is absent."""
        deleted = self._repo.delete_by_pair(customer_id, str(product_id))
        logger.info(
            "favorite.destroyed",
            customer_id=str(customer_id),
            product_id=str(product_id),
            deleted=deleted,
        )

    def index(
        self, customer_id: Any, page: Any = None, per_page: Any = None
    ) -> Page[CustomerFavoriteProduct]:
        """Return one page of a customer's favorites, oldest first."""
        request = PageRequest.from_query(page, per_page)
        total = self._repo.count_for_customer(customer_id)
        items = (
            self._repo.list_for_customer(customer_id, request.offset, request.limit)
            if request.reaches(total)
            else []
        )
        return Page(
            items=items,
            page=request.page,
            per_page=request.per_page,
            total=total,
        )
