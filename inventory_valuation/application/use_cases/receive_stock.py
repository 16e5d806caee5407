"""Receive Stock Use Case: IN movement valued by the item's costing method."""

from dataclasses import dataclass
from datetime import date

from inventory_valuation.application.dto.requests import ReceiveStockRequest
from inventory_valuation.application.dto.responses import (
    ReceiveStockResponse,
    ValuationEntryResponse,
    ValuationStateResponse,
)
from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.inventory import ItemValuationState, ValuationEntry

logger = get_logger(__name__)


@dataclass
class ReceiveStockResult:
    """Result of receiving stock."""

    state: ItemValuationState
    entry: ValuationEntry
    created: bool = False  # True if a new valuation state was created


class ReceiveStockUseCase:
    """Receive stock (IN movement) and revalue the item."""

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def execute(self, request: ReceiveStockRequest) -> ReceiveStockResult:
        """Execute receive stock use case."""
        logger.info(
            "receive_stock_started",
            item_id=request.item_id,
            warehouse_id=request.warehouse_id,
            quantity=request.quantity,
            unit_cost=request.unit_cost,
        )

        ledger = await self._get_ledger()
        posting = await ledger.receive(
            request.item_id,
            request.quantity,
            request.unit_cost,
            movement_type=request.movement_type,
            warehouse_id=request.warehouse_id,
            valuation_method=request.valuation_method,
            batch_number=request.batch_number,
            reference=request.reference,
            notes=request.notes,
            posting_date=(
                date.fromisoformat(request.posting_date) if request.posting_date else None
            ),
        )

        logger.info(
            "receive_stock_complete",
            item_id=posting.state.item_id,
            new_qty=posting.state.quantity,
            new_value=round(posting.state.value, 4),
            created=posting.created,
        )

        return ReceiveStockResult(
            state=posting.state,
            entry=posting.entry,
            created=posting.created,
        )

    def to_response(self, result: ReceiveStockResult) -> ReceiveStockResponse:
        """Convert result to API response."""
        return ReceiveStockResponse(
            state=ValuationStateResponse.from_state(
                result.state, result.entry.valuation_method
            ),
            entry=ValuationEntryResponse.from_entry(result.entry),
            created=result.created,
        )
