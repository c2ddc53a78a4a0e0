"""Product service layer (Use Cases).

Orchestrates the Product use cases, delegating persistence to the
injected ``IProductRepository``.

Lookups by id go through a single ``_find_product`` helper, the only
place that decides what "not found" means.  Operations that can miss
return a ``Result`` carrying ``ProductNotFound`` instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.core.results import Result
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

WRITABLE_FIELDS = ("name", "description", "price", "category")


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save_product(self, dto: ProductInputDTO) -> Product:
        """Persist a new product and return it with its assigned id."""
        product = Product(**{field: getattr(dto, field) for field in WRITABLE_FIELDS})
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: ProductInputDTO) -> Result[Product]:
        """Overwrite every writable field of an existing product.

        Fields absent from ``dto`` are ``None`` and still replace the
        stored value.  The id is never touched.
        """
        found = self._find_product(id)
        if not found.ok:
            return found

        product = found.value
        for field in WRITABLE_FIELDS:
            setattr(product, field, getattr(dto, field))

        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return Result.success(product)

    @transaction.atomic
    def delete_product(self, id: int) -> Result[None]:
        found = self._find_product(id)
        if not found.ok:
            return Result.failure(found.error)
        self._repo.delete(found.value)
        logger.info("product.deleted", product_id=id)
        return Result.success()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def fetch_all_products(self) -> List[Product]:
        """Return all products in storage order (possibly empty)."""
        return self._repo.find_all()

    def get_product_by_id(self, id: int) -> Result[Product]:
        return self._find_product(id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_product(self, id: int) -> Result[Product]:
        product = self._repo.find_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id)
            return Result.failure(ProductNotFound(f"Product {id} not found."))
        return Result.success(product)
