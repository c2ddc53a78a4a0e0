"""Unit tests for ProductSerializer output."""

from __future__ import annotations


import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_expected_fields(self):
        assert set(ProductSerializer().fields.keys()) == {
            "id",
            "name",
            "description",
            "price",
            "category",
        }

    def test_id_is_read_only(self):
        assert ProductSerializer().fields["id"].read_only is True

    def test_serializes_instance(self):
        product = Product.objects.create(
            name="Laptop",
            description="Machine Lenovo",
            price=10000.00,
            category="Electronics",
        )

        data = ProductSerializer(product).data

        assert data["id"] == product.id
        assert data["name"] == "Laptop"
        assert data["description"] == "Machine Lenovo"
        assert data["category"] == "Electronics"

    def test_price_is_not_a_string(self):
        product = Product(id=1, name="Laptop", price=19.9)

        data = ProductSerializer(product).data

        assert data["price"] == 19.9
        assert not isinstance(data["price"], str)

    def test_null_fields_serialize_as_none(self):
        data = ProductSerializer(Product(id=1)).data
        assert data["name"] is None
        assert data["price"] is None
