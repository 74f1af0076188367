# src/inventory/main.py
import logging
import sys

from inventory.cli.menu import InventoryMenu
from inventory.cli.prompts import Prompter
from inventory.core.config import Settings, get_settings
from inventory.domain.models import Brand
from inventory.domain.ports import InputClosedError
from inventory.repositories.product_repository import InMemoryProductRepository
from inventory.services.product_store import ProductStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def build_store(settings: Settings) -> ProductStore:
    store = ProductStore(
        repository=InMemoryProductRepository(),
        strict_updates=settings.strict_updates,
    )
    if settings.seed_demo_product:
        store.create("Phone S", Brand.SAMSUNG, 1000.5, 10)
    return store


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    menu = InventoryMenu(
        store=build_store(settings),
        prompter=Prompter(clear_screen=settings.clear_screen),
        settings=settings,
    )
    try:
        menu.run()
    except InputClosedError as e:
        logger.critical("Cannot continue without input: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.critical("Session interrupted")
        sys.exit(1)


if __name__ == "__main__":
    main()
