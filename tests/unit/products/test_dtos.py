"""Unit tests for Product DTOs.

Covers:
- Wire decoding: numeric strings, ``img`` alias, ignored extras.
- Type errors raised by Pydantic for undecodable values.
- UpdateProductDTO ``active`` default.
- Frozen immutability.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_decodes_json_payload(self):
        dto = CreateProductDTO.model_validate(
            {"code": "ABC123", "name": "Widget", "price": "9.99", "quantity": 5}
        )
        assert dto.code == "ABC123"
        assert dto.price == Decimal("9.99")
        assert dto.quantity == 5

    def test_missing_fields_default_to_none(self):
        dto = CreateProductDTO.model_validate({})
        assert dto.code is None
        assert dto.name is None
        assert dto.price is None
        assert dto.quantity is None
        assert dto.description is None
        assert dto.image is None

    def test_accepts_img_alias(self):
        dto = CreateProductDTO.model_validate({"img": "widget.png"})
        assert dto.image == "widget.png"

    def test_accepts_field_name(self):
        dto = CreateProductDTO.model_validate({"image": "widget.png"})
        assert dto.image == "widget.png"

    def test_server_assigned_fields_ignored(self):
        dto = CreateProductDTO.model_validate(
            {"code": "ABC123", "active": False, "id": 44, "createdAt": 1}
        )
        assert not hasattr(dto, "active")
        assert not hasattr(dto, "id")

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO.model_validate({"price": "cheap"})

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO.model_validate({"quantity": 1.5})

    def test_non_object_payload_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO.model_validate(["ABC123"])

    def test_is_frozen(self):
        dto = CreateProductDTO(code="ABC123")
        with pytest.raises(ValidationError):
            dto.code = "OTHER"


class TestUpdateProductDTO:
    def test_active_defaults_to_true(self):
        assert UpdateProductDTO.model_validate({"code": "ABC123"}).active is True

    def test_active_can_be_cleared(self):
        assert UpdateProductDTO.model_validate({"active": False}).active is False

    def test_invalid_active_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO.model_validate({"active": "maybe"})
