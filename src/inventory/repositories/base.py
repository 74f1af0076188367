from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inventory.domain.models import Product


class AbstractProductRepository(ABC):
    @abstractmethod
    def save(self, product: Product) -> Product:
        """Inserts a new product or replaces the one stored under the same ID."""
        ...

    @abstractmethod
    def find_by_id(self, product_id: uuid.UUID) -> Product | None:
        """Finds a product by ID."""
        ...

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Returns all products in insertion order."""
        ...

    @abstractmethod
    def delete(self, product_id: uuid.UUID) -> bool:
        """Deletes a product by ID. Returns True if deleted."""
        ...
