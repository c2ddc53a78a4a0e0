"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: ``find_by_id`` returns
``None`` instead of raising, and the Service Layer decides how to
translate a missing product into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def find_all(self) -> List[Product]:
        """Return all products ordered by id (insertion order)."""
        return list(Product.objects.all())

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        """Hard-delete a product row."""
        product_id = entity.id
        entity.delete()
        logger.info("product.deleted", product_id=product_id)
