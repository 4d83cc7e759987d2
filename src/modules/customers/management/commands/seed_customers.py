from __future__ import annotations

from datetime import date

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from modules.core import mongo
from modules.customers.dtos import AddressDTO, CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.repositories.mongo_repository import CustomerMongoRepository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("John", "Doe", "john.doe@example.com", "555-0101", "Springfield", "IL", date(1980, 11, 11), 10000.0),
    ("Jane", "Roe", "jane.roe@example.com", "555-0102", "Portland", "OR", date(1985, 3, 2), 52000.0),
    ("Richard", "Smith", "richard.smith@example.com", "555-0103", "Austin", "TX", date(1979, 7, 21), 67000.0),
    ("Maria", "Garcia", "maria.garcia@example.com", "555-0104", "Miami", "FL", date(1992, 1, 30), 48000.0),
    ("Wei", "Chen", "wei.chen@example.com", "555-0105", "Seattle", "WA", date(1988, 9, 14), 91000.0),
]


class Command(BaseCommand):
    help = "Seed MongoDB with development customers."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="List the customers without writing them.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Seeding customers...")
        dtos = [
            CreateCustomerDTO(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                address=AddressDTO(street="1 Main St", city=city, state=state),
                date_of_birth=born,
                income=income,
            )
            for first_name, last_name, email, phone, city, state, born, income in SEED_CUSTOMERS
        ]

        if options["dry_run"]:
            for dto in dtos:
                self.stdout.write(f"  {dto.first_name} {dto.last_name} <{dto.email}>")
            self.stdout.write(self.style.SUCCESS(f"Dry run: customers={len(dtos)}"))
            return

        try:
            created, skipped = async_to_sync(self._seed)(dtos)
        finally:
            mongo.close_clients()
        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )

    async def _seed(self, dtos: list[CreateCustomerDTO]) -> tuple[int, int]:
        service = CustomerService(repository=CustomerMongoRepository())
        created = skipped = 0
        for dto in dtos:
            try:
                await service.create_customer(dto, request_id="seed_customers")
            except CustomerAlreadyExists:
                skipped += 1
            else:
                created += 1
        return created, skipped
