"""Product catalog gateway (ProductGate).

Products are owned by an external catalog service; this module only
resolves a product reference to a record so the favorites endpoints can
reject unknown products before touching storage.

``get_product_catalog()`` picks the implementation from the
``PRODUCT_CATALOG_BACKEND`` setting: ``http`` talks to the catalog API,
``memory`` serves a process-local dict (tests and local development).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional

import httpx
import structlog
from django.conf import settings

from modules.core.exceptions import NotFound, ServiceUnavailable

logger = structlog.get_logger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = "Product not found!"
CATALOG_UNAVAILABLE_MESSAGE = "Product catalog unavailable"


class ProductNotFound(NotFound):
    """The catalog has no product with the requested identifier."""


class CatalogUnavailable(ServiceUnavailable):
    """The catalog could not be reached or answered with a server error."""


@dataclass(frozen=True)
class Product:
    id: str
    title: str = ""
    price: Optional[Decimal] = None
    brand: str = ""
    image: str = ""
    review_score: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> Product:
        try:
            price = Decimal(str(payload["price"])) if "price" in payload else None
        except InvalidOperation:
            price = None
        return cls(
            id=str(payload["id"]),
            title=payload.get("title", ""),
            price=price,
            brand=payload.get("brand", ""),
            image=payload.get("image", ""),
            review_score=payload.get("reviewScore"),
        )


class IProductCatalog(ABC):
    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]:
        """Return the product, or ``None`` when the catalog does not know it.

        Raises:
            CatalogUnavailable: the catalog could not answer.
        """

    def resolve(self, product_id: str) -> Product:
        """Like ``get_product`` but raises ``ProductNotFound`` for unknown ids."""
        product = self.get_product(product_id)
        if product is None:
            raise ProductNotFound(PRODUCT_NOT_FOUND_MESSAGE)
        return product


class HttpProductCatalog(IProductCatalog):
    """Catalog client for ``GET {base_url}/product/{id}/``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    def get_product(self, product_id: str) -> Optional[Product]:
        url = f"{self._base_url}/product/{product_id}/"
        try:
            response = (self._client or httpx).get(url, timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.error("catalog.request_failed", product_id=product_id, error=str(exc))
            raise CatalogUnavailable(CATALOG_UNAVAILABLE_MESSAGE) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("catalog.product_not_found", product_id=product_id)
            return None

        try:
            response.raise_for_status()
            return Product.from_payload(response.json())
        except (httpx.HTTPStatusError, ValueError, KeyError, TypeError) as exc:
            logger.error(
                "catalog.bad_response",
                product_id=product_id,
                status_code=response.status_code,
                error=str(exc),
            )
            raise CatalogUnavailable(CATALOG_UNAVAILABLE_MESSAGE) from exc


class InMemoryProductCatalog(IProductCatalog):
    """Dict-backed catalog for tests and local development."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: Dict[str, Product] = {p.id: p for p in products}

    def add(self, product: Product) -> None:
        self._products[product.id] = product

    def clear(self) -> None:
        self._products.clear()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(str(product_id))


# Process-wide store for the ``memory`` backend
memory_catalog = InMemoryProductCatalog()


def get_product_catalog() -> IProductCatalog:
    """Get the catalog implementation selected by settings."""
    backend = getattr(settings, "PRODUCT_CATALOG_BACKEND", "http")
    if backend == "memory":
        return memory_catalog
    return HttpProductCatalog(
        base_url=settings.PRODUCT_CATALOG_URL,
        timeout=getattr(settings, "PRODUCT_CATALOG_TIMEOUT", 5.0),
    )
