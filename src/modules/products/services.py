"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Creation validates every field and requires a code no other product
  uses, active or not.
- Update replaces all mutable fields wholesale without re-validating them
  and without re-checking code uniqueness; the table constraints are the
  only guard on that path.
- Soft delete flips ``active`` off; hard delete removes the row.
- ``created_at`` is stamped once; ``updated_at`` on every mutation.

Each workflow runs inside the transaction scope supplied at construction
(``transaction.atomic`` by default).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ContextManager, List, Optional

import structlog
from django.db import transaction

from modules.products import validators
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

TransactionScope = Callable[[], ContextManager]


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` and a transaction-scope factory via
    constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        atomic: TransactionScope = transaction.atomic,
    ) -> None:
        self._repo = repository
        self._atomic = atomic

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, candidate: Optional[CreateProductDTO]) -> Product:
        """Create a new product after validation and the uniqueness check.

        Raises:
            ProductValidationError: if any field is missing or out of range.
            ProductAlreadyExists: if another product already uses the code.
        """
        validators.validate_for_create(candidate)
        log = logger.bind(code=candidate.code)
        log.info("product.create_started")

        with self._atomic():
            if self._repo.exists_by_code(candidate.code):
                log.warning("product.duplicate_code")
                raise ProductAlreadyExists(
                    f"A product with code '{candidate.code}' already exists."
                )

            product = Product(
                code=candidate.code,
                name=candidate.name,
                description=candidate.description,
                price=candidate.price,
                quantity=candidate.quantity,
                image=candidate.image,
                active=True,
            )
            product.stamp_created()
            product = self._repo.save(product)

        log.info("product.created", product_id=product.id)
        return product

    def update(self, id: int, candidate: UpdateProductDTO) -> Product:
        """Overwrite every mutable field of an existing product.

        Raises:
            ProductValidationError: if ``id`` is not a positive number.
            ProductNotFound: if the product does not exist.
        """
        validators.validate_id(id)
        log = logger.bind(product_id=id)

        with self._atomic():
            product = self._repo.get_by_id(id)
            if product is None:
                log.warning("product.update_missing")
                raise ProductNotFound(f"Product not found with ID: {id}")

            product.code = candidate.code
            product.name = candidate.name
            product.description = candidate.description
            product.price = candidate.price
            product.quantity = candidate.quantity
            product.image = candidate.image
            product.active = candidate.active
            product.touch()
            product = self._repo.save(product)

        log.info("product.updated")
        return product

    def soft_delete(self, id: int) -> None:
        """Deactivate a product; the row stays readable.

        Raises:
            ProductValidationError: if ``id`` is not a positive number.
            ProductNotFound: if the product does not exist.
        """
        validators.validate_id(id)

        with self._atomic():
            product = self._repo.get_by_id(id)
            if product is None:
                raise ProductNotFound(f"Product not found with ID: {id}")
            product.deactivate()
            self._repo.save(product)

        logger.info("product.soft_deleted", product_id=id)

    def hard_delete(self, id: int) -> None:
        """Permanently remove a product.

        Raises:
            ProductValidationError: if ``id`` is not a positive number.
            ProductNotFound: if the product does not exist.
        """
        validators.validate_id(id)

        with self._atomic():
            if not self._repo.exists_by_id(id):
                raise ProductNotFound(f"Product not found with ID: {id}")
            self._repo.delete(id)

        logger.info("product.hard_deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Product]:
        """Return the product with this ID, or ``None``."""
        validators.validate_id(id)
        with self._atomic():
            return self._repo.get_by_id(id)

    def get_by_code(self, code: str) -> Optional[Product]:
        """Return the product with this code, or ``None``."""
        validators.validate_code(code)
        with self._atomic():
            return self._repo.get_by_code(code)

    def search_by_name(self, fragment: str) -> List[Product]:
        """Case-insensitive substring search over product names."""
        validators.validate_name(fragment)
        logger.info("product.search", fragment=fragment)
        with self._atomic():
            return self._repo.search_by_name(fragment)

    def list_active(self) -> List[Product]:
        with self._atomic():
            return self._repo.list_active()

    def list_all(self) -> List[Product]:
        """Return every product, including soft-deleted ones."""
        with self._atomic():
            return self._repo.list()

    def exists_by_code(self, code: str) -> bool:
        validators.validate_code(code)
        with self._atomic():
            return self._repo.exists_by_code(code)
