"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Domain
exceptions are caught and translated into the response envelope; any
other exception is left to the project exception handler, which answers
500 — the view never swallows generic exceptions.

Status mapping:
- ``ProductValidationError`` (and its ``ProductNotFound`` /
  ``ProductAlreadyExists`` kinds) → 400.
- An absent result on the by-id and by-code reads → 404.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import error_response, success_response
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductValidationError
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductExistsSerializer, ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

VALIDATION_ERROR_TITLE = "Validation error"
NOT_FOUND_TITLE = "Not found"


def _validation_error(exc: Exception) -> Response:
    logger.warning("product.request_invalid", error=str(exc))
    return error_response(
        VALIDATION_ERROR_TITLE, str(exc), status=status.HTTP_400_BAD_REQUEST
    )


def _parse_id(pk: str | None) -> int:
    if pk is None or not (pk.isascii() and pk.isdigit()):
        raise ProductValidationError("Product ID must be a positive number.")
    return int(pk)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet`` — all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
            product = self._service.create(dto)
        except (PydanticValidationError, ProductValidationError) as exc:
            return _validation_error(exc)

        return success_response(
            "Product created successfully",
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
        )

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products — active products only."""
        products = self._service.list_active()
        return success_response(
            "Products retrieved successfully",
            ProductSerializer(products, many=True).data,
        )

    @action(detail=False, methods=["get"], url_path="todos")
    def list_all(self, request: Request) -> Response:
        """GET /api/products/todos — active and inactive products."""
        products = self._service.list_all()
        return success_response(
            "Products retrieved successfully",
            ProductSerializer(products, many=True).data,
        )

    @action(detail=False, methods=["get"], url_path="buscar")
    def search(self, request: Request) -> Response:
        """GET /api/products/buscar?nombre=<fragment>"""
        fragment = request.query_params.get("nombre")
        try:
            products = self._service.search_by_name(fragment)
        except ProductValidationError as exc:
            return _validation_error(exc)

        return success_response(
            "Search completed successfully",
            ProductSerializer(products, many=True).data,
        )

    # ------------------------------------------------------------------
    # Single-product reads
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product_id = _parse_id(pk)
            product = self._service.get_by_id(product_id)
        except ProductValidationError as exc:
            return _validation_error(exc)

        if product is None:
            return error_response(
                NOT_FOUND_TITLE,
                f"Product not found with ID: {product_id}",
                status=status.HTTP_404_NOT_FOUND,
            )
        return success_response(
            "Product retrieved successfully", ProductSerializer(product).data
        )

    @action(detail=False, methods=["get"], url_path=r"codigo/(?P<code>[^/]+)")
    def by_code(self, request: Request, code: str | None = None) -> Response:
        """GET /api/products/codigo/{code}"""
        try:
            product = self._service.get_by_code(code)
        except ProductValidationError as exc:
            return _validation_error(exc)

        if product is None:
            return error_response(
                NOT_FOUND_TITLE,
                f"Product not found with code: {code}",
                status=status.HTTP_404_NOT_FOUND,
            )
        return success_response(
            "Product retrieved successfully", ProductSerializer(product).data
        )

    @action(detail=False, methods=["get"], url_path=r"existe/(?P<code>[^/]+)")
    def exists(self, request: Request, code: str | None = None) -> Response:
        """GET /api/products/existe/{code} — bare ``{exists, code}`` body."""
        try:
            exists = self._service.exists_by_code(code)
        except ProductValidationError as exc:
            return _validation_error(exc)

        return Response(ProductExistsSerializer({"exists": exists, "code": code}).data)

    # ------------------------------------------------------------------
    # Update / Delete
    # ------------------------------------------------------------------

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        try:
            product_id = _parse_id(pk)
            dto = UpdateProductDTO.model_validate(request.data)
            product = self._service.update(product_id, dto)
        except (PydanticValidationError, ProductValidationError) as exc:
            return _validation_error(exc)

        return success_response(
            "Product updated successfully", ProductSerializer(product).data
        )

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk} — soft delete."""
        try:
            self._service.soft_delete(_parse_id(pk))
        except ProductValidationError as exc:
            return _validation_error(exc)

        return success_response("Product deleted successfully")

    @action(detail=True, methods=["delete"], url_path="permanente")
    def hard_delete(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}/permanente"""
        try:
            self._service.hard_delete(_parse_id(pk))
        except ProductValidationError as exc:
            return _validation_error(exc)

        return success_response("Product permanently deleted")
