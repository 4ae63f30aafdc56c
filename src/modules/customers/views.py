"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into the error envelope
with the matching status code; anything unexpected propagates to the
project exception handler, which answers with a generic 500.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import error_response, validation_details
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    REGISTRATION_FAILED_MESSAGE,
    CustomerNotFound,
    DuplicateEmail,
    RegistrationFailed,
)
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService

INVALID_UPDATE_MESSAGE = "Error updating customer"


def _payload(request: Request) -> dict:
    return request.data if isinstance(request.data, dict) else {}


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /customers?page=&perPage="""
        page = self._service.index(
            page=request.query_params.get("page"),
            per_page=request.query_params.get("perPage"),
        )
        return Response(
            page.to_envelope(lambda items: CustomerSerializer(items, many=True).data)
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /customers/{pk}"""
        try:
            customer = self._service.show(pk)
        except CustomerNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /customers"""
        data = _payload(request)

        try:
            dto = CreateCustomerDTO(
                name=data.get("name", ""),
                email=data.get("email", ""),
                password=data.get("password"),
            )
        except PydanticValidationError as exc:
            return error_response(
                REGISTRATION_FAILED_MESSAGE,
                status.HTTP_400_BAD_REQUEST,
                validation_details(exc),
            )

        try:
            customer = self._service.store(dto)
        except (DuplicateEmail, RegistrationFailed) as exc:
            return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

        return Response(
            CustomerSerializer(customer).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /customers/{pk}"""
        data = _payload(request)

        try:
            dto = UpdateCustomerDTO(
                name=data.get("name"),
                email=data.get("email"),
                password=data.get("password"),
            )
        except PydanticValidationError as exc:
            return error_response(
                INVALID_UPDATE_MESSAGE,
                status.HTTP_400_BAD_REQUEST,
                validation_details(exc),
            )

        try:
            customer = self._service.update(pk, dto)
        except CustomerNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        except DuplicateEmail as exc:
            return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /customers/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /customers/{pk}"""
        try:
            self._service.destroy(pk)
        except CustomerNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_200_OK)
