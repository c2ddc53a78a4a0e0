"""Product domain exceptions.

Returned inside a failed ``Result`` by the Service Layer.  The API
layer renders them through ``modules.core.exceptions``.
"""

from __future__ import annotations

from modules.core.exceptions import DomainNotFound


class ProductNotFound(DomainNotFound):
    """No product exists with the requested id."""

    title = "Product not found"
