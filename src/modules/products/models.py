"""Product model for the listing board.

Business rules implemented:
- Name, description, manager and password are required, non-empty text.
- Status is one of ``FOR_SALE`` / ``SOLD_OUT`` and defaults to ``FOR_SALE``.
- Listings are ordered by most recent modification first.

Name uniqueness is *not* a storage constraint; the service performs an
exact-match pre-check on creation only.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class ProductStatus(models.TextChoices):
    FOR_SALE = "FOR_SALE", "For sale"
    SOLD_OUT = "SOLD_OUT", "Sold out"


class Product(BaseModel):
    """A product listing.

    ``password`` is a per-record shared secret stored as plain text; it
    gates updates and deletion and is never serialized back to clients.
    """

    name = models.CharField(max_length=255)
    description = models.TextField()
    manager = models.CharField(max_length=255)
    password = models.CharField(max_length=255)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.FOR_SALE,
    )

    class Meta:
        db_table = "products"
        ordering = ["-updated_at"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["updated_at"], name="products_updated_at_idx"),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.status})"
