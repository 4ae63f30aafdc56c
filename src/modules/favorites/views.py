"""Favorite product API views.

Before the ``FavoriteService`` runs, each request passes two gates:
the customer in the path must exist (``CustomerService.show``) and the
product must be known to the catalog (``IProductCatalog.resolve``) and
its id must fit the stored column.
Both report 404 in the error envelope; an unreachable catalog is 503.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.catalog.gateway import (
    PRODUCT_NOT_FOUND_MESSAGE,
    CatalogUnavailable,
    Product,
    ProductNotFound,
    get_product_catalog,
)
from modules.core.exceptions import NotFound
from modules.core.responses import error_response
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.favorites.exceptions import AlreadyFavorited
from modules.favorites.models import PRODUCT_ID_MAX_LENGTH
from modules.favorites.repositories.django_repository import FavoriteDjangoRepository
from modules.favorites.serializers import CustomerFavoriteProductSerializer
from modules.favorites.services import FavoriteService


class _FavoriteViewMixin:
    throttle_scope = "favorites"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._customers = CustomerService(repository=CustomerDjangoRepository())
        self._favorites = FavoriteService(repository=FavoriteDjangoRepository())

    def _resolve_product(self, product_id: str) -> Product:
        # Ids that cannot fit the column are never favoritable
        if len(product_id) > PRODUCT_ID_MAX_LENGTH:
            raise ProductNotFound(PRODUCT_NOT_FOUND_MESSAGE)
        return get_product_catalog().resolve(product_id)


class CustomerFavoriteProductView(_FavoriteViewMixin, APIView):
    """POST/DELETE /customers/{customer_id}/products/{product_id}/favorites"""

    serializer_class = CustomerFavoriteProductSerializer

    def post(self, request: Request, customer_id: str, product_id: str) -> Response:
        try:
            customer = self._customers.show(customer_id)
            product = self._resolve_product(product_id)
            link = self._favorites.store(customer.id, product.id)
        except NotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        except AlreadyFavorited as exc:
            return error_response(str(exc), status.HTTP_400_BAD_REQUEST)
        except CatalogUnavailable as exc:
            return error_response(str(exc), status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(
            CustomerFavoriteProductSerializer(link).data,
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request: Request, customer_id: str, product_id: str) -> Response:
        try:
            customer = self._customers.show(customer_id)
            product = self._resolve_product(product_id)
        except NotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        except CatalogUnavailable as exc:
            return error_response(str(exc), status.HTTP_503_SERVICE_UNAVAILABLE)

        self._favorites.destroy(customer.id, product.id)
        return Response(status=status.HTTP_200_OK)


class CustomerFavoriteListView(_FavoriteViewMixin, APIView):
    """GET /customers/{customer_id}/favorites?page=&perPage="""

    serializer_class = CustomerFavoriteProductSerializer

    def get(self, request: Request, customer_id: str) -> Response:
        try:
            customer = self._customers.show(customer_id)
        except NotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)

        page = self._favorites.index(
            customer.id,
            page=request.query_params.get("page"),
            per_page=request.query_params.get("perPage"),
        )
        return Response(
            page.to_envelope(
                lambda items: CustomerFavoriteProductSerializer(items, many=True).data
            )
        )
