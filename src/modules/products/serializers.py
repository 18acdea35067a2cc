"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).  Input goes
through the Pydantic DTOs in ``dtos.py``; business logic lives in the
Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource.

    Timestamps are exposed in camelCase, as epoch milliseconds.
    """

    createdAt = serializers.IntegerField(source="created_at", read_only=True)
    updatedAt = serializers.IntegerField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "name",
            "description",
            "price",
            "quantity",
            "image",
            "active",
            "createdAt",
            "updatedAt",
        ]


class ProductExistsSerializer(serializers.Serializer):
    """Shape of the bare existence-check answer."""

    exists = serializers.BooleanField()
    code = serializers.CharField()
