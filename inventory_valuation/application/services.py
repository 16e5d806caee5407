"""
Service factory functions for dependency injection.

Wires the in-memory infrastructure to the valuation ledger. Use cases
import from here when they are not handed a ledger explicitly.
"""

from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.application.locks import ItemLockRegistry

# Singleton instances
_lock_registry: ItemLockRegistry | None = None
_valuation_ledger: ValuationLedger | None = None


def get_lock_registry() -> ItemLockRegistry:
    """Get or create the process-wide item lock registry."""
    global _lock_registry
    if _lock_registry is None:
        _lock_registry = ItemLockRegistry()
    return _lock_registry


async def get_valuation_ledger() -> ValuationLedger:
    """
    Get or create the ValuationLedger.

    All ledgers in a process must share one lock registry, otherwise two of
    them could interleave writes to the same item.
    """
    global _valuation_ledger

    if _valuation_ledger is None:
        # Lazy import infrastructure to avoid circular imports
        from inventory_valuation.infrastructure.storage.memory import get_valuation_store

        store = await get_valuation_store()
        _valuation_ledger = ValuationLedger(store=store, locks=get_lock_registry())
    return _valuation_ledger


def reset_services() -> None:
    """Reset all singleton instances (for testing)."""
    global _lock_registry, _valuation_ledger
    _lock_registry = None
    _valuation_ledger = None
