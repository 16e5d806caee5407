"""Get Item Valuation Use Case: current state, cost layers and recent entries."""

from inventory_valuation.application.dto.responses import (
    BatchResponse,
    ItemValuationResponse,
    ValuationEntryResponse,
    ValuationStateResponse,
)
from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.core.entities.inventory import ItemValuationState
from inventory_valuation.core.exceptions import InventoryItemNotFoundError


class GetItemValuationUseCase:
    """Read one item's valuation without touching it."""

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def _get_state(
        self, item_id: str, warehouse_id: str | None
    ) -> tuple[ValuationLedger, ItemValuationState]:
        ledger = await self._get_ledger()
        state = await ledger.store.get_state(item_id, warehouse_id)
        if state is None:
            raise InventoryItemNotFoundError(item_id, warehouse_id)
        return ledger, state

    async def execute(
        self,
        item_id: str,
        warehouse_id: str | None = None,
        entry_limit: int = 20,
    ) -> ItemValuationResponse:
        """
        Get an item's valuation.

        Args:
            item_id: Item to look up.
            warehouse_id: Warehouse scope, None for the item-level state.
            entry_limit: Number of most recent ledger entries to include.

        Returns:
            ItemValuationResponse with the state (method resolved the same
            way postings resolve it) and entries newest first.
        """
        ledger, state = await self._get_state(item_id, warehouse_id)
        entries = await ledger.store.get_entries(item_id, warehouse_id, limit=entry_limit)

        return ItemValuationResponse(
            state=ValuationStateResponse.from_state(
                state, ledger.resolve_method(None, state)
            ),
            recent_entries=[ValuationEntryResponse.from_entry(e) for e in entries],
        )

    async def get_batches(
        self, item_id: str, warehouse_id: str | None = None
    ) -> list[BatchResponse]:
        """Cost layers of an item, oldest first."""
        _, state = await self._get_state(item_id, warehouse_id)
        return [BatchResponse.from_batch(b) for b in state.queue]
