# src/inventory/services/product_store.py
from __future__ import annotations

import logging
import uuid

from inventory.core.metrics import STORE_OPERATIONS
from inventory.domain.models import Brand, Product, ProductUpdateRequest
from inventory.domain.ports import (
    Clock,
    IdGenerator,
    ProductNotFoundError,
    local_now,
    new_product_id,
)
from inventory.repositories.base import AbstractProductRepository

logger = logging.getLogger(__name__)


class ProductStore:
    """
    Einzige Instanz, über die Produkte gelesen und verändert werden.

    ID-Generator und Uhr werden injiziert, damit Tests mit festen Werten laufen.
    Die Feldwerte werden vom Product-Modell validiert; ungültige Werte führen
    zu einem pydantic.ValidationError.
    """

    def __init__(
        self,
        repository: AbstractProductRepository,
        clock: Clock = local_now,
        id_generator: IdGenerator = new_product_id,
        strict_updates: bool = False,
    ) -> None:
        self._repo = repository
        self._clock = clock
        self._new_id = id_generator
        self._strict_updates = strict_updates

    def list_all(self) -> list[Product] | None:
        """Returns all products, or None when the store is empty."""
        products = self._repo.find_all()
        if not products:
            STORE_OPERATIONS.labels(operation="list", outcome="empty").inc()
            return None
        STORE_OPERATIONS.labels(operation="list", outcome="ok").inc()
        return products

    def search_by_name(self, query: str) -> Product | None:
        """
        Case-insensitive substring match on the name.
        Only the first match in insertion order is returned.
        """
        needle = query.lower()
        for product in self._repo.find_all():
            if needle in product.name.lower():
                STORE_OPERATIONS.labels(operation="search", outcome="ok").inc()
                return product
        STORE_OPERATIONS.labels(operation="search", outcome="not_found").inc()
        return None

    def create(self, name: str, brand: Brand, price: float, stock: int) -> Product:
        product_id = self._new_id()
        while self._repo.find_by_id(product_id) is not None:
            # uuid4-Kollisionen sind praktisch ausgeschlossen, Fake-Generatoren nicht
            logger.warning("Generated product ID %s already in use, drawing a new one", product_id)
            product_id = self._new_id()

        product = Product(
            id=product_id,
            name=name,
            brand=brand,
            price=price,
            stock=stock,
            updated_at=self._clock(),
        )
        self._repo.save(product)
        STORE_OPERATIONS.labels(operation="create", outcome="ok").inc()
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update(self, product_id: uuid.UUID, request: ProductUpdateRequest) -> Product | None:
        """
        Overwrites name, brand, price and stock of an existing product.
        An unknown ID is a silent no-op returning None, unless strict updates
        are enabled.
        """
        product = self._repo.find_by_id(product_id)
        if product is None:
            STORE_OPERATIONS.labels(operation="update", outcome="not_found").inc()
            if self._strict_updates:
                raise ProductNotFoundError(product_id=product_id)
            logger.debug("Update of unknown product %s ignored", product_id)
            return None

        updated = product.model_copy(
            update={**request.model_dump(), "updated_at": self._clock()}
        )
        self._repo.save(updated)
        STORE_OPERATIONS.labels(operation="update", outcome="ok").inc()
        logger.info("Updated product %s", product_id)
        return updated

    def delete(self, product_id: uuid.UUID) -> bool:
        deleted = self._repo.delete(product_id)
        STORE_OPERATIONS.labels(operation="delete", outcome="ok" if deleted else "not_found").inc()
        if deleted:
            logger.info("Deleted product %s", product_id)
        return deleted

    def __len__(self) -> int:
        return len(self._repo.find_all())
