"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are translated into HTTP responses by a mapping table
attached to each action.  Create, list and update share
``DEFAULT_ERRORS``; get-by-email and delete keep their own tables,
which existing clients rely on:

- get-by-email answers with an empty body: 404 when absent, the
  error's own status for a missing key, 400 for anything else.
- delete answers 404 with an empty body whatever the failure.
"""

from __future__ import annotations

from typing import AsyncIterator, Optional, TypeVar

import structlog
from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.errors import ErrorMapping, empty, map_errors, plain_text, structured
from modules.core.exceptions import StatusCodeError
from modules.core.middleware import get_correlation_id
from modules.customers.dtos import (
    CreateCustomerDTO,
    CustomerRequestDTO,
    UpdateCustomerDTO,
)
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerData,
)
from modules.customers.repositories.mongo_repository import CustomerMongoRepository
from modules.customers.serializers import (
    CustomerRequestSerializer,
    CustomerSummarySerializer,
)
from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)

T = TypeVar("T")
D = TypeVar("D", bound=CustomerRequestDTO)

DEFAULT_ERRORS = ErrorMapping(
    (CustomerAlreadyExists, plain_text(status.HTTP_409_CONFLICT)),
    (StatusCodeError, plain_text()),
    (InvalidCustomerData, structured(status.HTTP_400_BAD_REQUEST)),
    (CustomerNotFound, structured(status.HTTP_404_NOT_FOUND)),
    (APIException, structured()),
    fallback=structured(status.HTTP_500_INTERNAL_SERVER_ERROR),
)

GET_BY_EMAIL_ERRORS = ErrorMapping(
    (CustomerNotFound, empty(status.HTTP_404_NOT_FOUND)),
    (StatusCodeError, empty()),
    fallback=empty(status.HTTP_400_BAD_REQUEST),
)

DELETE_ERRORS = ErrorMapping(fallback=empty(status.HTTP_404_NOT_FOUND))


async def _collect(items: AsyncIterator[T]) -> list[T]:
    return [item async for item in items]


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerMongoRepository`` (DIP).
    The lookup segment is an email for GET and a customer ID for
    PUT/DELETE.
    """

    serializer_class = CustomerSummarySerializer
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerMongoRepository())

    @staticmethod
    def _read_payload(request: Request, dto_class: type[D]) -> Optional[D]:
        """Parse the JSON body into ``dto_class``; ``None`` when absent."""
        if not request.data:
            return None
        serializer = CustomerRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return dto_class.model_validate(serializer.validated_data)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=CustomerSummarySerializer(many=True))
    @map_errors(DEFAULT_ERRORS)
    def list(self, request: Request) -> Response:
        """GET /api/v1/customers"""
        request_id = get_correlation_id(request)
        logger.info("customer.list_requested", request_id=request_id)
        summaries = async_to_sync(_collect)(self._service.list_customers(request_id))
        return Response(CustomerSummarySerializer(summaries, many=True).data)

    @map_errors(GET_BY_EMAIL_ERRORS)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{email}"""
        request_id = get_correlation_id(request)
        logger.info("customer.get_requested", email=pk, request_id=request_id)
        summary = async_to_sync(self._service.get_customer)(pk, request_id)
        return Response(CustomerSummarySerializer(summary).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=CustomerRequestSerializer)
    @map_errors(DEFAULT_ERRORS)
    def create(self, request: Request) -> Response:
        """POST /api/v1/customers"""
        request_id = get_correlation_id(request)
        dto = self._read_payload(request, CreateCustomerDTO)
        logger.info(
            "customer.add_requested",
            phone=dto.phone if dto else None,
            request_id=request_id,
        )
        summary = async_to_sync(self._service.create_customer)(dto, request_id)
        return Response(CustomerSummarySerializer(summary).data)

    @extend_schema(request=CustomerRequestSerializer)
    @map_errors(DEFAULT_ERRORS)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{customer_id}"""
        request_id = get_correlation_id(request)
        logger.info("customer.update_requested", customer_id=pk, request_id=request_id)
        dto = self._read_payload(request, UpdateCustomerDTO)
        summary = async_to_sync(self._service.update_customer)(dto, pk, request_id)
        # An update that yields no record answers an empty 404.
        if summary is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSummarySerializer(summary).data)

    @map_errors(DELETE_ERRORS)
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{customer_id}"""
        request_id = get_correlation_id(request)
        logger.info("customer.delete_requested", customer_id=pk, request_id=request_id)
        async_to_sync(self._service.delete_customer)(pk, request_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
