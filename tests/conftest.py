# tests/conftest.py
import uuid
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta

import pytest

from inventory.cli.menu import InventoryMenu
from inventory.cli.prompts import Prompter
from inventory.core.config import Settings
from inventory.repositories.product_repository import InMemoryProductRepository
from inventory.services.product_store import ProductStore

START = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Liefert bei jedem Aufruf eine Sekunde später als beim vorherigen."""

    def __init__(self, start: datetime = START) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


class SequentialIds:
    def __init__(self) -> None:
        self.counter = 0

    def __call__(self) -> uuid.UUID:
        self.counter += 1
        return uuid.UUID(int=self.counter)


class ScriptedInput:
    """Ersetzt input(): liefert vorbereitete Zeilen, danach EOFError wie ein geschlossenes stdin."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def store(
    repository: InMemoryProductRepository, clock: FakeClock, ids: SequentialIds
) -> ProductStore:
    return ProductStore(repository=repository, clock=clock, id_generator=ids)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_demo_product=False, clear_screen=False)


@pytest.fixture
def output() -> list[str]:
    return []


@pytest.fixture
def make_prompter(output: list[str]) -> Callable[[list[str]], Prompter]:
    def _make(lines: list[str]) -> Prompter:
        return Prompter(read_line=ScriptedInput(lines), write=output.append, clear_screen=False)

    return _make


@pytest.fixture
def make_menu(
    store: ProductStore,
    test_settings: Settings,
    make_prompter: Callable[[list[str]], Prompter],
) -> Callable[[list[str]], InventoryMenu]:
    def _make(lines: list[str]) -> InventoryMenu:
        return InventoryMenu(store=store, prompter=make_prompter(lines), settings=test_settings)

    return _make
