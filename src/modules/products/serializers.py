"""Product DRF serializer for API output.

Input is parsed into ``ProductInputDTO``; this serializer only renders
``Product`` instances (and documents the schema for drf-spectacular).
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read/write serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "description", "price", "category"]
        read_only_fields = ["id"]
