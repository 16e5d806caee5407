"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValuationSettings(BaseSettings):
    """Valuation engine configuration."""

    model_config = SettingsConfigDict(env_prefix="VALUATION_")

    # Method used when an item carries no method of its own
    default_method: Literal["FIFO", "LIFO", "Weighted Average", "Moving Average"] = (
        "Weighted Average"
    )

    # Float tolerance for conservation checks
    quantity_tolerance: float = 1e-6

    # Re-check state invariants after every ledger transaction
    check_invariants: bool = True

    @field_validator("quantity_tolerance")
    @classmethod
    def tolerance_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("quantity_tolerance must be positive")
        return v


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Inventory Valuation Engine"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    valuation: ValuationSettings = Field(default_factory=ValuationSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
