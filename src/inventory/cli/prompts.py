# src/inventory/cli/prompts.py
from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import TypeVar

from inventory.cli import validators
from inventory.core.metrics import INVALID_INPUT
from inventory.domain.models import ProductUpdateRequest
from inventory.domain.ports import InputClosedError

T = TypeVar("T")

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class Prompter:
    """
    Liest Eingaben zeilenweise und fragt so lange nach, bis sie gültig sind.
    Ein geschlossener Eingabestrom ist nicht behebbar und wird als
    InputClosedError weitergereicht.
    """

    def __init__(
        self,
        read_line: ReadLine = input,
        write: WriteLine = print,
        clear_screen: bool = True,
    ) -> None:
        self._read_line = read_line
        self._write = write
        self._clear_screen = clear_screen

    def write(self, text: str) -> None:
        self._write(text)

    def clear(self) -> None:
        if self._clear_screen:
            self._write(CLEAR_SCREEN)

    def ask(self, prompt: str, field: str) -> str:
        try:
            return self._read_line(prompt).strip()
        except (EOFError, OSError) as e:
            raise InputClosedError(field) from e

    def ask_until_valid(
        self,
        prompt: str,
        field: str,
        parse: Callable[[str], T],
        error_message: str,
    ) -> T:
        while True:
            raw = self.ask(prompt, field)
            try:
                return parse(raw)
            except ValueError:
                INVALID_INPUT.labels(field=field).inc()
                self._write(error_message)

    def pause(self) -> None:
        self.ask("Enter to continue...", "continue")

    def ask_product_data(self) -> ProductUpdateRequest:
        self.clear()
        self._write("New product")
        name = self.ask_until_valid(
            "Name: ",
            "name",
            validators.parse_name,
            "Invalid name! The name must not be empty.",
        )
        brand = self.ask_until_valid(
            "Brand (Apple, Samsung or Google): ",
            "brand",
            validators.parse_brand,
            "Invalid brand! Please enter Apple, Google or Samsung.",
        )
        price = self.ask_until_valid(
            "Price: ",
            "price",
            validators.parse_price,
            "Invalid price! Enter a positive number.",
        )
        stock = self.ask_until_valid(
            "Stock: ",
            "stock",
            validators.parse_stock,
            "Invalid stock! Enter a positive whole number.",
        )
        return ProductUpdateRequest(name=name, brand=brand, price=price, stock=stock)

    def ask_product_id(self) -> uuid.UUID:
        return self.ask_until_valid(
            "Product ID: ",
            "id",
            validators.parse_product_id,
            "Invalid ID! Please enter a valid UUID.",
        )
