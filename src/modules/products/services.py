"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- A product name may not be registered twice (exact-match pre-check on
  create; not a storage constraint, so concurrent creates can race).
- Updates and deletions require the product's password.
- Status defaults to ``FOR_SALE`` on creation and is kept as stored when
  an update omits it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import structlog
from django.db import transaction
from django.utils.crypto import constant_time_compare

from modules.products.exceptions import (
    PasswordMismatch,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product, ProductStatus

if TYPE_CHECKING:
    from modules.products.dtos import PasswordDTO, ProductPayloadDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductPayloadDTO) -> Product:
        """Register a new product after the duplicate-name pre-check.

        Raises:
            ProductAlreadyExists: if a product with the same name exists.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(f"Product '{dto.name}' already registered.")

        product = Product(
            name=dto.name,
            description=dto.description,
            manager=dto.manager,
            password=dto.password,
            status=dto.status or ProductStatus.FOR_SALE,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: ProductPayloadDTO) -> Product:
        """Replace the editable fields of a product, password included.

        Raises:
            ProductNotFound: if the product does not exist.
            PasswordMismatch: if ``dto.password`` differs from the stored one.
        """
        product = self._get_owned(id, dto.password)

        product.name = dto.name
        product.description = dto.description
        product.manager = dto.manager
        product.password = dto.password
        if dto.status is not None:
            product.status = dto.status

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id), status=product.status)
        return product

    @transaction.atomic
    def delete_product(self, id: str, dto: PasswordDTO) -> Product:
        """Remove a product and return its last known state.

        Raises:
            ProductNotFound: if the product does not exist.
            PasswordMismatch: if ``dto.password`` differs from the stored one.
        """
        product = self._get_owned(id, dto.password)
        self._repo.delete(str(product.id))
        logger.info("product.deleted", product_id=str(id))
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> Sequence[Product]:
        """Return every product, most recently updated first."""
        return self._repo.list()

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned(self, id: str, password: str) -> Product:
        """Lock the product and check the caller knows its password."""
        product = self._repo.get_for_update(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        if not constant_time_compare(password, product.password):
            logger.warning("product.password_mismatch", product_id=str(id))
            raise PasswordMismatch(f"Password for product {id} does not match.")
        return product
