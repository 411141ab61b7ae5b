"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True  # JSON lines on stdout, plain text otherwise

    # Registration settings
    phone_number_prefix: str = "+44"
    phone_number_length: int = 13  # Including the prefix

    # Payment settings
    card_charger_approves: bool = True  # Outcome of the console card charger


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
