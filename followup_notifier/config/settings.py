"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Structured-data store (Supabase PostgREST)
    supabase_url: str = "http://localhost:54321"
    supabase_anon_key: str = ""

    # Email delivery
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com"
    email_backend: Literal["resend", "console"] = "resend"
    email_from: str = "Bidi <notifications@yourdomain.com>"

    # Public application base URL, used for the request deep link
    app_url: str = "http://localhost:3000"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
