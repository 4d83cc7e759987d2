"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Every operation receives the request's correlation ID (``request_id``)
and binds it to the log lines it emits.

Uniqueness of email and existence of the target customer are checked
with separate repository calls before writing.  Two concurrent requests
may both pass a check; the store has no constraint to stop them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator, Optional

import structlog

from modules.customers.dtos import CustomerSummaryDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerData,
    InvalidCustomerInput,
    UnexpectedCustomerError,
)

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_customer(
        self, dto: Optional[CreateCustomerDTO], request_id: str
    ) -> CustomerSummaryDTO:
        """Create a new customer unless its email is already taken.

        Raises:
            InvalidCustomerData: if ``dto`` is missing.
            CustomerAlreadyExists: if a customer with the email exists.
        """
        if dto is None:
            raise InvalidCustomerData("Customer request cannot be null")

        log = logger.bind(request_id=request_id, email=dto.email)

        if await self._repo.exists_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Customer already exists")

        customer = await self._repo.save(dto.to_entity())
        log.info("customer.created", customer_id=customer.customer_id)
        return CustomerSummaryDTO.from_entity(customer)

    async def update_customer(
        self,
        dto: Optional[UpdateCustomerDTO],
        customer_id: str,
        request_id: str,
    ) -> CustomerSummaryDTO:
        """Replace every mutable field of an existing customer.

        Only ``first_name`` is required to be non-empty.

        Raises:
            InvalidCustomerData: if ``dto`` is missing or has no first name.
            CustomerNotFound: if the customer does not exist.
        """
        log = logger.bind(request_id=request_id, customer_id=customer_id)
        log.info("customer.updating")

        if dto is None or not dto.first_name:
            raise InvalidCustomerData("Invalid customer data")

        customer = await self._get_existing(customer_id)
        customer = await self._repo.save(dto.apply_to(customer))
        log.info("customer.updated")
        return CustomerSummaryDTO.from_entity(customer)

    async def delete_customer(self, customer_id: str, request_id: str) -> None:
        """Permanently remove a customer.

        Raises:
            InvalidCustomerData: if ``customer_id`` is empty.
            CustomerNotFound: if the customer does not exist.
        """
        log = logger.bind(request_id=request_id, customer_id=customer_id)
        log.info("customer.deleting")

        if not customer_id:
            raise InvalidCustomerData("Invalid customer data")

        customer = await self._get_existing(customer_id)
        await self._repo.delete(customer)
        log.info("customer.deleted")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_customer(
        self, email: Optional[str], request_id: str
    ) -> CustomerSummaryDTO:
        """Retrieve a customer by email, ignoring case.

        Raises:
            InvalidCustomerInput: if ``email`` is empty.
            CustomerNotFound: if no customer has this email.
            UnexpectedCustomerError: if the store fails.
        """
        if not email:
            raise InvalidCustomerInput("Email cannot be null")

        log = logger.bind(request_id=request_id, email=email)
        log.info("customer.searching")

        try:
            customer = await self._repo.get_by_email(email.lower())
        except Exception as exc:
            raise UnexpectedCustomerError("Unexpected error occurred") from exc

        if customer is None:
            raise CustomerNotFound("Customer not found")

        log.info("customer.retrieved", customer_id=customer.customer_id)
        return CustomerSummaryDTO.from_entity(customer)

    async def list_customers(
        self, request_id: str
    ) -> AsyncIterator[CustomerSummaryDTO]:
        """Lazily yield a summary of every stored customer."""
        logger.info("customer.listed", request_id=request_id)
        async for customer in self._repo.list():
            yield CustomerSummaryDTO.from_entity(customer)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _get_existing(self, customer_id: str) -> Customer:
        customer = await self._repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(f"Customer not found with ID: {customer_id}")
        return customer
