"""Unit tests for the Product repositories.

Covers:
- ProductDjangoRepository: save/find_by_id/find_all/delete against the DB.
- InMemoryProductRepository: id assignment, ordering, id non-reuse.
"""

from __future__ import annotations


import pytest

from modules.products.models import Product
from modules.products.repositories import (
    InMemoryProductRepository,
    IProductRepository,
    ProductDjangoRepository,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _new_product(**overrides) -> Product:
    defaults = {
        "name": "Laptop",
        "description": "Machine Lenovo",
        "price": 10000.00,
        "category": "Electronics",
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Interface
# ===========================================================================


class TestRepositoryInterface:
    @pytest.mark.parametrize(
        "repo_class", [ProductDjangoRepository, InMemoryProductRepository]
    )
    def test_is_instance_of_interface(self, repo_class):
        assert isinstance(repo_class(), IProductRepository)


# ===========================================================================
# ProductDjangoRepository
# ===========================================================================


class TestDjangoSave:
    def test_assigns_id_on_create(self):
        repo = ProductDjangoRepository()
        product = _new_product()
        assert product.id is None

        saved = repo.save(product)

        assert saved is product
        assert saved.id is not None
        assert Product.objects.filter(id=saved.id).exists()

    def test_updates_existing_product(self):
        repo = ProductDjangoRepository()
        product = repo.save(_new_product())
        original_id = product.id

        product.name = "Updated Name"
        repo.save(product)

        product.refresh_from_db()
        assert product.id == original_id
        assert product.name == "Updated Name"
        assert Product.objects.count() == 1


class TestDjangoFindById:
    def test_returns_product_when_found(self):
        repo = ProductDjangoRepository()
        product = repo.save(_new_product())

        result = repo.find_by_id(product.id)

        assert result is not None
        assert result.id == product.id
        assert result.price == 10000.00

    def test_returns_none_when_not_found(self):
        repo = ProductDjangoRepository()
        assert repo.find_by_id(999999) is None

    def test_returns_none_for_non_numeric_id(self):
        repo = ProductDjangoRepository()
        assert repo.find_by_id("not-a-number") is None


class TestDjangoFindAll:
    def test_returns_empty_list_when_no_products(self):
        assert ProductDjangoRepository().find_all() == []

    def test_returns_products_in_insertion_order(self):
        repo = ProductDjangoRepository()
        for name in ("Laptop", "Mobile Samsung A-12", "Mobile Iphone-15"):
            repo.save(_new_product(name=name))

        results = repo.find_all()

        assert [p.name for p in results] == [
            "Laptop",
            "Mobile Samsung A-12",
            "Mobile Iphone-15",
        ]


class TestDjangoDelete:
    def test_removes_row(self):
        repo = ProductDjangoRepository()
        product = repo.save(_new_product())
        product_id = product.id

        repo.delete(product)

        assert not Product.objects.filter(id=product_id).exists()
        assert repo.find_by_id(product_id) is None


# ===========================================================================
# InMemoryProductRepository
# ===========================================================================


class TestInMemoryRepository:
    def test_assigns_sequential_ids(self):
        repo = InMemoryProductRepository()
        ids = [repo.save(_new_product(name=n)).id for n in ("a", "b", "c")]
        assert ids == [1, 2, 3]

    def test_save_existing_keeps_id(self):
        repo = InMemoryProductRepository()
        product = repo.save(_new_product())
        product.name = "Changed"

        repo.save(product)

        assert product.id == 1
        assert repo.find_by_id(1).name == "Changed"
        assert len(repo.find_all()) == 1

    def test_find_all_preserves_insertion_order(self):
        repo = InMemoryProductRepository()
        for name in ("first", "second", "third"):
            repo.save(_new_product(name=name))
        assert [p.name for p in repo.find_all()] == ["first", "second", "third"]

    def test_find_by_id_missing_returns_none(self):
        repo = InMemoryProductRepository()
        assert repo.find_by_id(1) is None
        assert repo.find_by_id("abc") is None

    def test_deleted_ids_are_not_reused(self):
        repo = InMemoryProductRepository()
        first = repo.save(_new_product())
        repo.delete(first)

        second = repo.save(_new_product())

        assert second.id == 2
        assert repo.find_by_id(1) is None
        assert repo.find_all() == [second]
