from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

CATALOG = [
    ("ELEC-001", "Monitor 27in", "Electronics", Decimal("1299.90")),
    ("ELEC-002", "Mechanical Keyboard", "Electronics", Decimal("399.90")),
    ("ELEC-003", "Gaming Mouse", "Electronics", Decimal("249.90")),
    ("ELEC-004", "Notebook 14in", "Electronics", Decimal("3999.00")),
    ("ELEC-005", "Headset", "Electronics", Decimal("299.90")),
    ("FURN-001", "Office Desk", "Furniture", Decimal("899.00")),
    ("FURN-002", "Ergonomic Chair", "Furniture", Decimal("1499.00")),
    ("FURN-003", "Bookshelf", "Furniture", Decimal("699.00")),
    ("OFF-001", "A4 Paper", "Office", Decimal("29.90")),
    ("OFF-002", "Blue Pen", "Office", Decimal("4.90")),
    ("OFF-003", "Notebook", "Office", Decimal("19.90")),
    ("OFF-004", "Stapler", "Office", Decimal("39.90")),
    ("OFF-005", "Sticky Notes", "Office", Decimal("12.90")),
    ("OFF-006", "Calculator", "Office", Decimal("89.90")),
]


class Command(BaseCommand):
    help = "Seed the catalogue with sample products (skips codes already taken)."

    def add_arguments(self, parser):
        parser.add_argument("--seed", type=int, default=42, help="Random seed for quantities.")

    def handle(self, *args, **options):
        random.seed(options["seed"])
        service = ProductService(repository=ProductDjangoRepository())
        self.stdout.write("Seeding products...")

        created = skipped = 0
        for code, name, category, price in CATALOG:
            if service.exists_by_code(code):
                skipped += 1
                continue
            service.create(
                CreateProductDTO(
                    code=code,
                    name=name,
                    description=category,
                    price=price,
                    quantity=random.randint(10, 200),
                )
            )
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
