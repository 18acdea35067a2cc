"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

DTOs only decode the wire shape (types and camelCase aliases).  Business
limits such as code length or price range are *not* checked here; they
belong to ``modules.products.validators`` so that create and update keep
their different validation policies.

- ``CreateProductDTO``: candidate for product creation.
- ``UpdateProductDTO``: candidate for a wholesale product update.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _ProductCandidate(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    code: str | None = None
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    quantity: int | None = None
    image: str | None = Field(default=None, alias="img")


class CreateProductDTO(_ProductCandidate):
    """Immutable DTO for product creation requests.

    ``active`` and the timestamps are server-assigned, so any value sent
    by the client is ignored.
    """


class UpdateProductDTO(_ProductCandidate):
    """Immutable DTO for product update requests.

    Every field replaces the stored value, including ``None``.  A body
    that omits ``active`` re-activates the product.
    """

    active: bool = True
