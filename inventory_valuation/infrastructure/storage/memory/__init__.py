"""In-memory storage implementations."""

from inventory_valuation.infrastructure.storage.memory.valuation_store import (
    InMemoryValuationStore,
)

# Singleton instances
_valuation_store: InMemoryValuationStore | None = None


async def get_valuation_store() -> InMemoryValuationStore:
    """Get singleton valuation store instance."""
    global _valuation_store
    if _valuation_store is None:
        _valuation_store = InMemoryValuationStore()
    return _valuation_store


def reset_valuation_store() -> None:
    """Drop the singleton store (for testing)."""
    global _valuation_store
    _valuation_store = None


__all__ = [
    "InMemoryValuationStore",
    "get_valuation_store",
    "reset_valuation_store",
]
