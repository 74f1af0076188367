# src/inventory/domain/ports.py
import uuid
from collections.abc import Callable
from datetime import datetime

# ---------------------------------------------------------------------------
# Injected capabilities
# ---------------------------------------------------------------------------

Clock = Callable[[], datetime]
IdGenerator = Callable[[], uuid.UUID]


def local_now() -> datetime:
    """Aktuelle lokale Zeit, immer mit Zeitzonen-Offset."""
    return datetime.now().astimezone()


def new_product_id() -> uuid.UUID:
    return uuid.uuid4()


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class ProductNotFoundError(Exception):
    def __init__(self, product_id: uuid.UUID):
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class InputClosedError(Exception):
    def __init__(self, field: str):
        super().__init__(f"Input stream closed while reading '{field}'")
        self.field = field
