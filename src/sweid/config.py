"""
sweid configuration management using pydantic-settings.

Settings are read from SWEID_* environment variables or a .env file.
"""

import logging
from datetime import date
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWEID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Login policy
    accept_coordination_numbers: bool = Field(
        default=False,
        description="Enable login for samordningsnummer as well as personnummer",
    )

    # Clock
    reference_date: Optional[date] = Field(
        default=None,
        description="Pin 'today' to a fixed date (ISO format) for reproducible runs",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and make sure logging knows it."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Ensure the clock is not pinned in production."""
        if self.environment == "production" and self.reference_date is not None:
            raise ValueError("REFERENCE_DATE must not be set in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


def current_date(config: Optional[Settings] = None) -> date:
    """
    Return the date the classifier should treat as today.

    Uses the pinned reference date when configured, otherwise the system clock.
    """
    if config is None:
        config = settings
    if config.reference_date is not None:
        return config.reference_date
    return date.today()


# Global settings instance
settings = Settings()
