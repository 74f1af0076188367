# src/inventory/domain/models.py
from __future__ import annotations

import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

# Der Bestand wurde ursprünglich als vorzeichenloser 16-Bit-Zähler geführt.
STOCK_MAX = 65_535

# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


class Brand(StrEnum):
    APPLE = "Apple"
    GOOGLE = "Google"
    SAMSUNG = "Samsung"

    @classmethod
    def _missing_(cls, value: object) -> Brand | None:
        # "apple", " SAMSUNG " etc.
        if isinstance(value, str):
            needle = value.strip().lower()
            for member in cls:
                if member.value.lower() == needle:
                    return member
        return None


# ---------------------------------------------------------------------------
# Aggregate: Product
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """
    Ein Artikel im Lager.
    Die ID wird einmalig beim Anlegen vergeben und nie neu zugewiesen.
    """

    id: uuid.UUID
    name: str = Field(min_length=1)
    brand: Brand
    price: float = Field(gt=0, allow_inf_nan=False)
    stock: int = Field(ge=0, le=STOCK_MAX)
    updated_at: datetime

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------


class ProductUpdateRequest(BaseModel):
    name: str = Field(min_length=1)
    brand: Brand
    price: float = Field(gt=0, allow_inf_nan=False)
    stock: int = Field(ge=0, le=STOCK_MAX)

    model_config = {"frozen": True}
