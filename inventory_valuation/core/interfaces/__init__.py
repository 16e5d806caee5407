"""Core interfaces (ports) for dependency injection."""

from inventory_valuation.core.interfaces.valuation_store import IValuationStore
from inventory_valuation.core.interfaces.valuation_strategy import IValuationStrategy

__all__ = [
    "IValuationStrategy",
    "IValuationStore",
]
