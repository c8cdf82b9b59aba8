"""
Configuration management using Pydantic Settings.
Challenge: Centralized config, env validation, type safety.
Design: Single source of truth for database, strategy defaults, logging and display.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inventory.schemas.listing import ListingStrategy

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Inventory Listings"
    debug: bool = False

    # Database (SQLite for demos; postgresql+asyncpg://... works the same)
    database_url: str = "sqlite+aiosqlite:///./inventory.db"

    # Listing defaults: which query shape runs, and where it runs
    listing_strategy: ListingStrategy = ListingStrategy.PER_ITEM_CORRELATED
    listing_engine: Literal["database", "memory"] = "database"

    # Logging
    log_level: LogLevel = "INFO"
    log_json: bool = False

    # Presentation placeholders for empty CSV fields
    no_contributors_placeholder: str = "No Contributors"
    no_genres_placeholder: str = "No Genres"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every call."""
    return Settings()
