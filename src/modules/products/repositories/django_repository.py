"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an API response.  No business rules live here.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent IDs.
        """
        return Product.objects.filter(id=id).first()

    def exists_by_id(self, id: int) -> bool:
        return Product.objects.filter(id=id).exists()

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def list_active(self) -> List[Product]:
        return list(Product.objects.active())

    def search_by_name(self, fragment: str) -> List[Product]:
        return list(Product.objects.filter(name__icontains=fragment))

    def get_by_code(self, code: str) -> Optional[Product]:
        return Product.objects.filter(code=code).first()

    def exists_by_code(self, code: str) -> bool:
        return Product.objects.filter(code=code).exists()

    def save(self, entity: Product) -> Product:
        """Persist (insert or update) a product."""
        entity.save()
        logger.debug("product.saved", product_id=entity.id, code=entity.code)
        return entity

    def delete(self, id: int) -> bool:
        """Physically remove a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        deleted, _ = Product.objects.filter(id=id).delete()
        if deleted:
            logger.debug("product.row_deleted", product_id=id)
        return bool(deleted)
