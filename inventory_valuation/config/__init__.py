"""Configuration module."""

from inventory_valuation.config.logging import (
    configure_logging,
    get_logger,
    item_context,
)
from inventory_valuation.config.settings import (
    Settings,
    ValuationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "ValuationSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "item_context",
]
