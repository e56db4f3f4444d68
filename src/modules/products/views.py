"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Every action follows the same pipeline: validate the body with a
Pydantic DTO, call the service, and wrap the outcome in the response
envelope.  Domain exceptions are caught and translated into HTTP status
codes here; anything unexpected propagates to
``modules.core.exceptions.envelope_exception_handler`` (500).
"""

from __future__ import annotations

from django.utils.translation import gettext_lazy as _
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import envelope
from modules.products.dtos import (
    PasswordDTO,
    ProductPayloadDTO,
    field_errors,
    summarize,
)
from modules.products.exceptions import (
    PasswordMismatch,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

CREATED = _("Product registered successfully.")
DUPLICATE = _("This product is already registered.")
LISTED = _("Product list retrieved successfully.")
RETRIEVED = _("Product retrieved successfully.")
UPDATED = _("Product updated successfully.")
DELETED = _("Product deleted successfully.")
NOT_FOUND = _("Product does not exist.")
PASSWORD_MISMATCH = _("Password does not match.")


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``repository_class`` (DIP); pass another
    repository class to ``as_view`` to run the API over a different store.
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return envelope(
            status.HTTP_200_OK,
            LISTED,
            products=ProductSerializer(products, many=True).data,
        )

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return envelope(status.HTTP_404_NOT_FOUND, NOT_FOUND)
        return envelope(
            status.HTTP_200_OK, RETRIEVED, data=ProductSerializer(product).data
        )

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = ProductPayloadDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid(exc)

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists:
            return envelope(status.HTTP_400_BAD_REQUEST, DUPLICATE)

        return envelope(
            status.HTTP_201_CREATED, CREATED, data=ProductSerializer(product).data
        )

    def update(self, request: Request, pk: str) -> Response:
        """PUT /products/{pk}"""
        try:
            dto = ProductPayloadDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid(exc)

        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return envelope(status.HTTP_404_NOT_FOUND, NOT_FOUND)
        except PasswordMismatch:
            return envelope(status.HTTP_401_UNAUTHORIZED, PASSWORD_MISMATCH)

        return envelope(
            status.HTTP_200_OK, UPDATED, data=ProductSerializer(product).data
        )

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /products/{pk}"""
        try:
            dto = PasswordDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return self._invalid(exc)

        try:
            product = self._service.delete_product(pk, dto)
        except ProductNotFound:
            return envelope(status.HTTP_404_NOT_FOUND, NOT_FOUND)
        except PasswordMismatch:
            return envelope(status.HTTP_401_UNAUTHORIZED, PASSWORD_MISMATCH)

        return envelope(
            status.HTTP_200_OK, DELETED, data=ProductSerializer(product).data
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _invalid(exc: PydanticValidationError) -> Response:
        errors = field_errors(exc)
        return envelope(status.HTTP_400_BAD_REQUEST, summarize(errors), errors=errors)
