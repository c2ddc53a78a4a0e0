"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
``ProductInputDTO`` is the contract between the API layer and the
Service layer for both creation and full-overwrite updates.  DTOs are
immutable (``frozen=True``).

Only type coercion happens here; there are no business rules on the
field values.  Unknown keys (including ``id``) are ignored so a client
can never choose or change a product's identifier.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProductInputDTO(BaseModel):
    """Immutable DTO carrying the four writable product fields.

    A field missing from the request is ``None``; on update it still
    replaces the stored value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
