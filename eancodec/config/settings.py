"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "staging", "prod"] = "dev"

    # Code generation
    ean_default_prefix: str = Field("200", description="Prefix used when none is given")
    ean_product_id_overflow: Literal["reject", "truncate"] = Field(
        "reject", description="Policy for product ids longer than 9 digits"
    )
    ean_random_seed: int | None = Field(None, description="Seed for reproducible random codes")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("ean_default_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        if not v.isascii() or not v.isdigit():
            raise ValueError("ean_default_prefix must contain only digits")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
