# src/inventory/cli/menu.py
from __future__ import annotations

import logging
from collections.abc import Callable

from inventory.cli import validators
from inventory.cli.formatting import format_product_list, format_search_hit
from inventory.cli.prompts import Prompter
from inventory.core.config import Settings
from inventory.core.metrics import INVALID_INPUT
from inventory.domain.ports import ProductNotFoundError
from inventory.services.product_store import ProductStore

logger = logging.getLogger(__name__)

MENU_LINES = (
    "========== INVENTORY =========",
    "1. See all",
    "2. Search",
    "3. Create",
    "4. Update",
    "5. Delete",
    "6. Exit",
)

EXIT_OPTION = 6


class InventoryMenu:
    """Interaktive Schleife: Eingabe lesen, ProductStore aufrufen, Ergebnis ausgeben."""

    def __init__(self, store: ProductStore, prompter: Prompter, settings: Settings) -> None:
        self._store = store
        self._prompter = prompter
        self._settings = settings
        self._actions: dict[int, Callable[[], None]] = {
            1: self.show_all,
            2: self.search,
            3: self.create,
            4: self.update,
            5: self.delete,
        }

    def run(self) -> None:
        while True:
            self._prompter.clear()
            for line in MENU_LINES:
                self._prompter.write(line)

            raw = self._prompter.ask("--> ", "menu")
            try:
                option = validators.parse_menu_option(raw)
            except ValueError:
                INVALID_INPUT.labels(field="menu").inc()
                self._prompter.write("Invalid input.")
                continue

            if option == EXIT_OPTION:
                logger.debug("Exit selected")
                return
            self._actions[option]()

    def show_all(self) -> None:
        self._prompter.clear()
        products = self._store.list_all()
        if products is None:
            self._prompter.write("No products")
        else:
            for line in format_product_list(products, self._settings.id_display_length):
                self._prompter.write(line)
        self._prompter.pause()

    def search(self) -> None:
        self._prompter.clear()
        query = self._prompter.ask("Search by name: ", "query")
        if len(self._store) == 0:
            self._prompter.write("No products")
        else:
            product = self._store.search_by_name(query)
            if product is None:
                self._prompter.write(f"'{query}' not found.")
            else:
                self._prompter.write(format_search_hit(product))
        self._prompter.pause()

    def create(self) -> None:
        data = self._prompter.ask_product_data()
        product = self._store.create(data.name, data.brand, data.price, data.stock)
        self._prompter.write(f"Product created with ID {product.id}.")

    def update(self) -> None:
        product_id = self._prompter.ask_product_id()
        request = self._prompter.ask_product_data()
        try:
            updated = self._store.update(product_id, request)
        except ProductNotFoundError:
            self._prompter.write("Product not found.")
            return
        # Unbekannte ID ohne strict_updates: bewusst keine Ausgabe
        if updated is not None:
            self._prompter.write(f"Product with ID {updated.id} updated.")

    def delete(self) -> None:
        product_id = self._prompter.ask_product_id()
        if self._store.delete(product_id):
            self._prompter.write(f"Product with ID {product_id} deleted.")
        else:
            self._prompter.write("Product not found.")
