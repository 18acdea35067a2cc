"""Product model with code uniqueness and range constraints.

Business rules implemented at the storage level:
- ``code`` is unique across all rows, active or not.
- ``price`` stays within [0.01, 999999.99].
- ``quantity`` stays within [0, 1000000].
- Soft delete via ``active`` (inherited from SoftDeleteModel).

The application checks the same limits before creating a row (see
``modules.products.validators``); the constraints below are the backstop
for writes that skip those checks.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel
from modules.products.constants import (
    PRICE_MAX,
    PRICE_MIN,
    QUANTITY_MAX,
    QUANTITY_MIN,
    TEXT_COLUMN_LENGTH,
)


class Product(SoftDeleteModel):
    """Product aggregate root."""

    code = models.CharField(max_length=TEXT_COLUMN_LENGTH, unique=True)
    name = models.CharField(max_length=TEXT_COLUMN_LENGTH)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.IntegerField()
    image = models.CharField(  # noqa: DJ01
        max_length=500, null=True, blank=True, default=None
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=PRICE_MIN, price__lte=PRICE_MAX),
                name="products_price_range",
            ),
            models.CheckConstraint(
                condition=models.Q(
                    quantity__gte=QUANTITY_MIN, quantity__lte=QUANTITY_MAX
                ),
                name="products_quantity_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
