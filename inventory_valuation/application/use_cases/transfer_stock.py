"""Transfer Stock Use Case: move stock between warehouses at carrying cost."""

from dataclasses import dataclass
from datetime import date

from inventory_valuation.application.dto.requests import TransferStockRequest
from inventory_valuation.application.dto.responses import (
    TransferStockResponse,
    ValuationStateResponse,
)
from inventory_valuation.application.ledger import LedgerPosting, ValuationLedger
from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.inventory import MovementType

logger = get_logger(__name__)


@dataclass
class TransferStockResult:
    """Result of a warehouse transfer."""

    outgoing: LedgerPosting
    incoming: LedgerPosting

    @property
    def transferred_value(self) -> float:
        return self.outgoing.entry.cost_of_goods_sold


class TransferStockUseCase:
    """
    Transfer stock between two warehouses.

    The source issues at its own costing method; the destination receives
    the same quantity at the issue's rate, so total value is preserved.
    Both warehouses stay locked for the whole transfer. If the receipt side
    fails, the source issue is reverted before the error propagates.
    """

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def execute(self, request: TransferStockRequest) -> TransferStockResult:
        """Execute transfer use case."""
        logger.info(
            "transfer_stock_started",
            item_id=request.item_id,
            from_warehouse=request.from_warehouse_id,
            to_warehouse=request.to_warehouse_id,
            quantity=request.quantity,
        )

        ledger = await self._get_ledger()
        posting_date = (
            date.fromisoformat(request.posting_date) if request.posting_date else None
        )

        async with ledger.locks.hold(
            (request.item_id, request.from_warehouse_id),
            (request.item_id, request.to_warehouse_id),
        ):
            outgoing = await ledger.issue_unlocked(
                request.item_id,
                request.quantity,
                movement_type=MovementType.TRANSFER_OUT,
                warehouse_id=request.from_warehouse_id,
                reference=request.reference,
                notes=request.notes,
                posting_date=posting_date,
            )
            try:
                incoming = await ledger.receive_unlocked(
                    request.item_id,
                    request.quantity,
                    outgoing.entry.outgoing_rate,
                    movement_type=MovementType.TRANSFER_IN,
                    warehouse_id=request.to_warehouse_id,
                    reference=request.reference,
                    notes=request.notes,
                    posting_date=posting_date,
                )
            except Exception:
                await ledger.revert_unlocked(outgoing)
                raise

        logger.info(
            "transfer_stock_complete",
            item_id=request.item_id,
            transferred_value=round(outgoing.entry.cost_of_goods_sold, 4),
        )
        return TransferStockResult(outgoing=outgoing, incoming=incoming)

    def to_response(self, result: TransferStockResult) -> TransferStockResponse:
        """Convert result to API response."""
        return TransferStockResponse(
            source=ValuationStateResponse.from_state(
                result.outgoing.state, result.outgoing.entry.valuation_method
            ),
            destination=ValuationStateResponse.from_state(
                result.incoming.state, result.incoming.entry.valuation_method
            ),
            transferred_value=result.transferred_value,
        )
