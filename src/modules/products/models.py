"""Product model: the single resource managed by the catalog API.

The primary key is an auto-incremented integer assigned by the
database on the first save and never changed afterwards.  The four
descriptive fields are nullable because updates overwrite them
unconditionally with whatever the request carried.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """Catalog product.

    ``price`` is a double-precision float stored as given: no rounding,
    and negative values are accepted.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01
    description = models.TextField(null=True, blank=True)  # noqa: DJ01
    price = models.FloatField(null=True, blank=True)
    category = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
