"""In-memory implementation of the valuation store."""

import asyncio
from datetime import datetime

from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.inventory import (
    ItemValuationState,
    ValuationEntry,
)
from inventory_valuation.core.exceptions import ConcurrencyConflictError
from inventory_valuation.core.interfaces.valuation_store import IValuationStore

logger = get_logger(__name__)

StateKey = tuple[str, str | None]


class InMemoryValuationStore(IValuationStore):
    """
    Dict-backed valuation store.

    Writes use optimistic versioning: a state may only replace the stored
    state whose version it was read from.
    """

    def __init__(self) -> None:
        self._states: dict[StateKey, ItemValuationState] = {}
        self._entries: list[ValuationEntry] = []
        self._next_entry_id = 1
        self._lock = asyncio.Lock()

    async def get_state(
        self, item_id: str, warehouse_id: str | None = None
    ) -> ItemValuationState | None:
        return self._states.get((item_id, warehouse_id))

    async def save_state(self, state: ItemValuationState) -> ItemValuationState:
        async with self._lock:
            current = self._states.get(state.key)
            current_version = current.version if current is not None else 0
            if state.version != current_version:
                raise ConcurrencyConflictError(
                    item_id=state.item_id,
                    expected_version=state.version,
                    actual_version=current_version,
                )

            stored = state.model_copy(
                update={"version": current_version + 1, "updated_at": datetime.utcnow()}
            )
            self._states[state.key] = stored

        logger.debug(
            "valuation_state_saved",
            item_id=stored.item_id,
            warehouse_id=stored.warehouse_id,
            version=stored.version,
        )
        return stored

    async def delete_state(self, item_id: str, warehouse_id: str | None = None) -> bool:
        async with self._lock:
            return self._states.pop((item_id, warehouse_id), None) is not None

    async def list_states(
        self, limit: int = 100, offset: int = 0
    ) -> list[ItemValuationState]:
        states = sorted(
            self._states.values(),
            key=lambda s: (s.item_id, s.warehouse_id or ""),
        )
        return states[offset : offset + limit]

    async def add_entry(self, entry: ValuationEntry) -> ValuationEntry:
        async with self._lock:
            stored = entry.model_copy(update={"id": self._next_entry_id})
            self._next_entry_id += 1
            self._entries.append(stored)
        return stored

    async def get_entries(
        self,
        item_id: str,
        warehouse_id: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[ValuationEntry]:
        matching = [
            e
            for e in reversed(self._entries)
            if e.item_id == item_id and e.warehouse_id == warehouse_id
        ]
        return matching[offset : offset + limit]

    async def delete_entry(self, entry_id: int) -> bool:
        async with self._lock:
            for i, entry in enumerate(self._entries):
                if entry.id == entry_id:
                    del self._entries[i]
                    return True
        return False
