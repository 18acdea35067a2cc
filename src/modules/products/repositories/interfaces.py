"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the service layer
needs: unique-code access, the active-only listing and name search.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Product]:
        """Retrieve a product by its unique code."""

    @abstractmethod
    def exists_by_code(self, code: str) -> bool:
        """Return ``True`` when any product, active or not, uses ``code``."""

    @abstractmethod
    def list_active(self) -> List[Product]:
        """List products whose ``active`` flag is set."""

    @abstractmethod
    def search_by_name(self, fragment: str) -> List[Product]:
        """List products whose name contains ``fragment``, ignoring case."""
