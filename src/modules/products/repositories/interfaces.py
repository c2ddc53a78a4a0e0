"""Product repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product resource.

    Needs nothing beyond the four generic primitives: ``save``,
    ``find_all``, ``find_by_id`` and ``delete``.
    """
