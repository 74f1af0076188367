# src/inventory/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Inventory"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "WARNING"

    # Startbestand: ein Demo-Produkt ("Phone S")
    seed_demo_product: bool = True

    # Terminal
    clear_screen: bool = True
    id_display_length: int = Field(default=8, ge=1, le=36)

    # Update einer unbekannten ID: stiller No-op (False) oder ProductNotFoundError (True)
    strict_updates: bool = False

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
