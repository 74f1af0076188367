# src/inventory/repositories/product_repository.py
from __future__ import annotations

import uuid

from inventory.domain.models import Product
from inventory.repositories.base import AbstractProductRepository


class InMemoryProductRepository(AbstractProductRepository):
    """
    In-Memory Repository für eine einzelne Sitzung.
    Alle Daten gehen beim Beenden des Prozesses verloren.
    """

    def __init__(self) -> None:
        # dict behält die Einfügereihenfolge bei; ein Update ersetzt den Wert
        # unter demselben Schlüssel, ohne die Position zu ändern.
        self._products: dict[uuid.UUID, Product] = {}

    def save(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    def find_by_id(self, product_id: uuid.UUID) -> Product | None:
        return self._products.get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._products.values())

    def delete(self, product_id: uuid.UUID) -> bool:
        return self._products.pop(product_id, None) is not None

    def __len__(self) -> int:
        return len(self._products)
