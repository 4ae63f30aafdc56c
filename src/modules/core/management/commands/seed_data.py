from __future__ import annotations

import random

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import DuplicateEmail
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.favorites.exceptions import AlreadyFavorited
from modules.favorites.repositories.django_repository import FavoriteDjangoRepository
from modules.favorites.services import FavoriteService

SEED_CUSTOMERS = [
    ("Ana Souza", "ana@example.com"),
    ("Bruno Lima", "bruno@example.com"),
    ("Carla Mendes", "carla@example.com"),
    ("Daniel Costa", "daniel@example.com"),
    ("Eduardo Alves", "eduardo@example.com"),
    ("Fernanda Rocha", "fernanda@example.com"),
    ("Gabriel Santos", "gabriel@example.com"),
    ("Helena Ferreira", "helena@example.com"),
    ("Igor Ramos", "igor@example.com"),
    ("Julia Oliveira", "julia@example.com"),
]

SEED_PRODUCT_IDS = [
    "1bf0f365-fbdd-4e21-9786-da459d78dd1f",
    "958ec015-cfcf-258d-c6df-1721de0ab6ea",
    "6a512e6c-6627-d286-5d18-583558359ab6",
    "4bd442b1-4a7d-2475-be97-a7b22a08a024",
    "de2911eb-ce5c-e783-1ca5-82d0ccd4e3d8",
]


class Command(BaseCommand):
    help = "Seed database with development customers and favorites."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        customers = self._seed_customers()
        favorites_created = self._seed_favorites(customers)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"customers={len(customers)}, "
                f"favorites={favorites_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        if User.objects.filter(username="api").exists():
            return 0
        User.objects.create_user("api", password="api-client-123")
        return 1

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        repository = CustomerDjangoRepository()
        service = CustomerService(repository=repository)
        customers: list[Customer] = []
        for name, email in SEED_CUSTOMERS:
            try:
                customer = service.store(
                    CreateCustomerDTO(name=name, email=email, password="changeme123")
                )
            except DuplicateEmail:
                customer = repository.get_by_email(email)
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_favorites(self, customers: list[Customer]) -> int:
        self.stdout.write("Creating favorites...")
        service = FavoriteService(repository=FavoriteDjangoRepository())
        created = 0
        for customer in customers:
            for product_id in random.sample(SEED_PRODUCT_IDS, k=random.randint(0, 3)):
                try:
                    service.store(customer.id, product_id)
                except AlreadyFavorited:
                    continue
                created += 1
        self.stdout.write(self.style.SUCCESS("Creating favorites... Done!"))
        return created
