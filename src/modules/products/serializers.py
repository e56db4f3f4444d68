"""Product DRF serializer for API output.

The serializer operates at the Interface layer (API Views) and only
renders products; request bodies are validated by the Pydantic DTOs
in ``dtos.py``.  ``password`` is deliberately absent from ``fields``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only representation of the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "manager",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
