"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by id.  Ids come from a counter that
starts at 1 and only grows, so ids of deleted products are never
reused.  State lives in the process: suitable for tests and
single-process embedding, not for multi-worker deployments.
"""

from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING, Dict, List, Optional

from modules.products.repositories.interfaces import IProductRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class InMemoryProductRepository(IProductRepository):
    """Dict-backed Product repository preserving insertion order."""

    def __init__(self) -> None:
        self._rows: Dict[int, Product] = {}
        self._ids = count(1)

    def find_by_id(self, id: int) -> Optional[Product]:
        try:
            return self._rows.get(int(id))
        except (TypeError, ValueError):
            return None

    def find_all(self) -> List[Product]:
        return list(self._rows.values())

    def save(self, entity: Product) -> Product:
        if entity.id is None:
            entity.id = next(self._ids)
        self._rows[entity.id] = entity
        return entity

    def delete(self, entity: Product) -> None:
        self._rows.pop(entity.id, None)
