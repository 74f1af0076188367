"""Parser für Benutzereingaben; jeder Parser wirft ValueError bei ungültiger Eingabe."""

from __future__ import annotations

import math
import uuid

from inventory.domain.models import STOCK_MAX, Brand

MENU_OPTIONS = range(1, 7)


def parse_menu_option(raw: str) -> int:
    option = int(raw.strip())
    if option not in MENU_OPTIONS:
        raise ValueError(f"Menu option out of range: {option}")
    return option


def parse_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise ValueError("Name must not be empty")
    return name


def parse_brand(raw: str) -> Brand:
    return Brand(raw.strip())


def parse_price(raw: str) -> float:
    price = float(raw.strip())
    if not math.isfinite(price) or price <= 0:
        raise ValueError(f"Price must be a positive number: {raw!r}")
    return price


def parse_stock(raw: str) -> int:
    stock = int(raw.strip())
    if not 0 <= stock <= STOCK_MAX:
        raise ValueError(f"Stock must be between 0 and {STOCK_MAX}: {raw!r}")
    return stock


def parse_product_id(raw: str) -> uuid.UUID:
    return uuid.UUID(raw.strip())
