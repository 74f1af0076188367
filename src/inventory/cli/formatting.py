from __future__ import annotations

from datetime import datetime

from inventory.domain.models import Product


def format_timestamp(value: datetime) -> str:
    return value.isoformat(sep=" ", timespec="seconds")


def format_product_row(position: int, product: Product, id_length: int = 8) -> str:
    """Eine Zeile der Produktliste; position ist 1-basiert."""
    return (
        f"{position}. ID: {str(product.id)[:id_length]}. Name: {product.name}, "
        f"brand: {product.brand}, price {product.price}, stock: {product.stock}, "
        f"updated at: {format_timestamp(product.updated_at)}"
    )


def format_product_list(products: list[Product], id_length: int = 8) -> list[str]:
    return [
        format_product_row(position, product, id_length)
        for position, product in enumerate(products, start=1)
    ]


def format_search_hit(product: Product) -> str:
    return f"ID: {product.id}. Name: {product.name} - Brand: {product.brand}."
