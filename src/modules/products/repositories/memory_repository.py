"""In-memory implementation of the Product repository.

Keeps unsaved ``Product`` instances in a dict keyed by ``str(id)``.
Entities are copied on the way in and out, so callers only observe
changes they explicitly ``save``.  Timestamps are maintained the same
way the ORM maintains ``auto_now_add`` / ``auto_now``.

Intended for service-level tests and local experiments; nothing here
is shared between instances.
"""

from __future__ import annotations

import copy
import itertools
from typing import Dict, List, Optional, Tuple

from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class InMemoryProductRepository(IProductRepository):
    """Dict-backed Product repository."""

    def __init__(self) -> None:
        self._rows: Dict[str, Tuple[int, Product]] = {}
        # Breaks ties between saves that land on the same timestamp.
        self._sequence = itertools.count()

    def get_by_id(self, id: str) -> Optional[Product]:
        row = self._rows.get(str(id))
        return copy.copy(row[1]) if row else None

    def get_for_update(self, id: str) -> Optional[Product]:
        return self.get_by_id(id)

    def get_by_name(self, name: str) -> Optional[Product]:
        for _, product in self._rows.values():
            if product.name == name:
                return copy.copy(product)
        return None

    def list(self) -> List[Product]:
        rows = sorted(
            self._rows.values(),
            key=lambda row: (row[1].updated_at, row[0]),
            reverse=True,
        )
        return [copy.copy(product) for _, product in rows]

    def save(self, entity: Product) -> Product:
        now = timezone.now()
        if entity.created_at is None:
            entity.created_at = now
        entity.updated_at = now
        self._rows[str(entity.id)] = (next(self._sequence), copy.copy(entity))
        return entity

    def delete(self, id: str) -> bool:
        return self._rows.pop(str(id), None) is not None

    def __len__(self) -> int:
        return len(self._rows)
