"""Field validators for the Product aggregate.

Pure functions: no I/O, no mutation.  Each raises
``ProductValidationError`` with a human-readable message on the first
violation it finds.  String validators trim before checking length and
charset, but the trimmed value is not written back; what gets stored is
what the caller supplied.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from modules.products.constants import (
    CODE_MAX_LENGTH,
    CODE_MIN_LENGTH,
    CODE_PATTERN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_MAX,
    PRICE_MIN,
    QUANTITY_MAX,
    QUANTITY_MIN,
)
from modules.products.exceptions import ProductValidationError


def validate_code(code: Optional[str]) -> None:
    if code is None or not code.strip():
        raise ProductValidationError("Product code must not be empty.")

    code = code.strip()
    if not CODE_MIN_LENGTH <= len(code) <= CODE_MAX_LENGTH:
        raise ProductValidationError(
            f"Product code must be between {CODE_MIN_LENGTH} and "
            f"{CODE_MAX_LENGTH} characters."
        )
    if not CODE_PATTERN.match(code):
        raise ProductValidationError(
            "Product code may only contain letters, digits, hyphens and underscores."
        )


def validate_name(name: Optional[str]) -> None:
    if name is None or not name.strip():
        raise ProductValidationError("Product name must not be empty.")

    name = name.strip()
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise ProductValidationError(
            f"Product name must be between {NAME_MIN_LENGTH} and "
            f"{NAME_MAX_LENGTH} characters."
        )


def validate_price(price: Any) -> None:
    if price is None:
        raise ProductValidationError("Product price must not be null.")

    if not isinstance(price, Decimal):
        try:
            price = Decimal(str(price))
        except InvalidOperation as exc:
            raise ProductValidationError("Product price must be a number.") from exc

    if price < PRICE_MIN:
        raise ProductValidationError(f"Product price must be at least {PRICE_MIN}.")
    if price > PRICE_MAX:
        raise ProductValidationError(f"Product price cannot exceed {PRICE_MAX}.")


def validate_quantity(quantity: Optional[int]) -> None:
    if quantity is None:
        raise ProductValidationError("Product quantity must not be null.")
    if quantity < QUANTITY_MIN:
        raise ProductValidationError("Product quantity cannot be negative.")
    if quantity > QUANTITY_MAX:
        raise ProductValidationError(f"Product quantity cannot exceed {QUANTITY_MAX:,}.")


def validate_id(id: Optional[int]) -> None:
    if id is None or id <= 0:
        raise ProductValidationError("Product ID must be a positive number.")


def validate_for_create(candidate: Any) -> None:
    """Run every creation-time field check on ``candidate``.

    ``candidate`` is anything exposing ``code``, ``name``, ``price`` and
    ``quantity`` attributes (an input DTO or an unsaved ``Product``).
    Checks run in that order; the first failure aborts.
    """
    if candidate is None:
        raise ProductValidationError("Product must not be null.")

    validate_code(candidate.code)
    validate_name(candidate.name)
    validate_price(candidate.price)
    validate_quantity(candidate.quantity)
