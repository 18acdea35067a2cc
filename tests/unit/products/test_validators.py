"""Unit tests for the Product field validators.

Covers:
- validate_code: emptiness, length bounds, charset.
- validate_name: emptiness, length bounds.
- validate_price / validate_quantity: null and range boundaries.
- validate_id: null and non-positive values.
- validate_for_create: null candidate and check ordering.
"""

from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest

from modules.products import validators
from modules.products.exceptions import ProductValidationError

pytestmark = pytest.mark.unit


def _candidate(**overrides):
    fields = {
        "code": "ABC123",
        "name": "Widget",
        "price": Decimal("9.99"),
        "quantity": 5,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


# ===========================================================================
# validate_code
# ===========================================================================


class TestValidateCode:
    @pytest.mark.parametrize(
        "code", ["ABC", "a" * 20, "abc-123", "ABC_123", "  ABC  ", "0-_"]
    )
    def test_accepts_valid_codes(self, code):
        validators.validate_code(code)

    @pytest.mark.parametrize("code", [None, "", "   ", "\t\n"])
    def test_rejects_empty(self, code):
        with pytest.raises(ProductValidationError, match="must not be empty"):
            validators.validate_code(code)

    @pytest.mark.parametrize("code", ["AB", "a" * 21, " AB "])
    def test_rejects_length_out_of_bounds(self, code):
        with pytest.raises(ProductValidationError, match="between 3 and 20"):
            validators.validate_code(code)

    @pytest.mark.parametrize("code", ["ABC 123", "ABC!", "código", "AB.C", "A/BC"])
    def test_rejects_disallowed_characters(self, code):
        with pytest.raises(ProductValidationError, match="letters, digits"):
            validators.validate_code(code)


# ===========================================================================
# validate_name
# ===========================================================================


class TestValidateName:
    @pytest.mark.parametrize("name", ["Pen", "x" * 100, "Café com leite", " Pen "])
    def test_accepts_valid_names(self, name):
        validators.validate_name(name)

    @pytest.mark.parametrize("name", [None, "", "    "])
    def test_rejects_empty(self, name):
        with pytest.raises(ProductValidationError, match="must not be empty"):
            validators.validate_name(name)

    @pytest.mark.parametrize("name", ["ab", "x" * 101, "  ab  "])
    def test_rejects_length_out_of_bounds(self, name):
        with pytest.raises(ProductValidationError, match="between 3 and 100"):
            validators.validate_name(name)


# ===========================================================================
# validate_price
# ===========================================================================


class TestValidatePrice:
    @pytest.mark.parametrize(
        "price", [Decimal("0.01"), Decimal("999999.99"), Decimal("10"), 9.99, 1]
    )
    def test_accepts_in_range(self, price):
        validators.validate_price(price)

    def test_rejects_none(self):
        with pytest.raises(ProductValidationError, match="must not be null"):
            validators.validate_price(None)

    @pytest.mark.parametrize("price", [Decimal("0.00"), Decimal("0.009"), Decimal("-1")])
    def test_rejects_below_minimum(self, price):
        with pytest.raises(ProductValidationError, match="at least 0.01"):
            validators.validate_price(price)

    @pytest.mark.parametrize("price", [Decimal("1000000.00"), Decimal("999999.991")])
    def test_rejects_above_maximum(self, price):
        with pytest.raises(ProductValidationError, match="cannot exceed 999999.99"):
            validators.validate_price(price)

    def test_rejects_non_numeric(self):
        with pytest.raises(ProductValidationError, match="must be a number"):
            validators.validate_price("cheap")


# ===========================================================================
# validate_quantity
# ===========================================================================


class TestValidateQuantity:
    @pytest.mark.parametrize("quantity", [0, 1, 1_000_000])
    def test_accepts_in_range(self, quantity):
        validators.validate_quantity(quantity)

    def test_rejects_none(self):
        with pytest.raises(ProductValidationError, match="must not be null"):
            validators.validate_quantity(None)

    def test_rejects_negative(self):
        with pytest.raises(ProductValidationError, match="cannot be negative"):
            validators.validate_quantity(-1)

    def test_rejects_above_maximum(self):
        with pytest.raises(ProductValidationError, match="cannot exceed 1,000,000"):
            validators.validate_quantity(1_000_001)


# ===========================================================================
# validate_id
# ===========================================================================


class TestValidateId:
    def test_accepts_positive(self):
        validators.validate_id(1)

    @pytest.mark.parametrize("id", [None, 0, -5])
    def test_rejects_null_or_non_positive(self, id):
        with pytest.raises(ProductValidationError, match="positive number"):
            validators.validate_id(id)


# ===========================================================================
# validate_for_create
# ===========================================================================


class TestValidateForCreate:
    def test_accepts_valid_candidate(self):
        validators.validate_for_create(_candidate())

    def test_rejects_none(self):
        with pytest.raises(ProductValidationError, match="must not be null"):
            validators.validate_for_create(None)

    def test_code_checked_before_name(self):
        with pytest.raises(ProductValidationError, match="code"):
            validators.validate_for_create(_candidate(code="!", name="x"))

    def test_name_checked_before_price(self):
        with pytest.raises(ProductValidationError, match="name"):
            validators.validate_for_create(_candidate(name="x", price=None))

    def test_price_checked_before_quantity(self):
        with pytest.raises(ProductValidationError, match="price"):
            validators.validate_for_create(_candidate(price=None, quantity=None))

    def test_quantity_checked(self):
        with pytest.raises(ProductValidationError, match="quantity"):
            validators.validate_for_create(_candidate(quantity=None))
