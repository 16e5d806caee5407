"""Abstract interface for valuation state storage."""

from abc import ABC, abstractmethod

from inventory_valuation.core.entities.inventory import (
    ItemValuationState,
    ValuationEntry,
)


class IValuationStore(ABC):
    """Interface for item valuation state and ledger entry persistence."""

    @abstractmethod
    async def get_state(
        self, item_id: str, warehouse_id: str | None = None
    ) -> ItemValuationState | None:
        """Get valuation state of an item, or None if it has never been received."""
        pass

    @abstractmethod
    async def save_state(self, state: ItemValuationState) -> ItemValuationState:
        """
        Persist a new state.

        `state.version` must equal the stored version; the stored copy is
        returned with the version incremented. Raises ConcurrencyConflictError
        on mismatch.
        """
        pass

    @abstractmethod
    async def list_states(
        self, limit: int = 100, offset: int = 0
    ) -> list[ItemValuationState]:
        """List valuation states with pagination."""
        pass

    @abstractmethod
    async def add_entry(self, entry: ValuationEntry) -> ValuationEntry:
        """Record a ledger entry."""
        pass

    @abstractmethod
    async def get_entries(
        self,
        item_id: str,
        warehouse_id: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[ValuationEntry]:
        """Get ledger entries for an item, newest first."""
        pass

    @abstractmethod
    async def delete_state(self, item_id: str, warehouse_id: str | None = None) -> bool:
        """Delete valuation state of an item. Returns True if one existed."""
        pass

    @abstractmethod
    async def delete_entry(self, entry_id: int) -> bool:
        """Delete a ledger entry. Returns True if it existed."""
        pass
