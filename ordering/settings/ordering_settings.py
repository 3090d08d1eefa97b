from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class OrderingSettings(BaseSettings):
    """
    Ordering service settings.

    Read from the environment (prefix ORDERING_) or a local .env file:
        database_url -> ORDERING_DATABASE_URL
        echo_sql     -> ORDERING_ECHO_SQL
        log_level    -> ORDERING_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDERING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./ordering.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False

    log_level: str = "INFO"


@lru_cache()
def get_settings() -> OrderingSettings:
    """Return cached global settings."""
    return OrderingSettings()
