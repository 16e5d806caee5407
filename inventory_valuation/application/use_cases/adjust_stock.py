"""Adjust Stock Use Case: signed inventory adjustment."""

from dataclasses import dataclass
from datetime import date

from inventory_valuation.application.dto.requests import AdjustStockRequest
from inventory_valuation.application.ledger import LedgerPosting, ValuationLedger
from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.inventory import MovementType
from inventory_valuation.core.exceptions import InvalidQuantityError

logger = get_logger(__name__)


@dataclass
class AdjustStockResult:
    """Result of an adjustment."""

    posting: LedgerPosting
    direction: MovementType


class AdjustStockUseCase:
    """
    Post a stock adjustment.

    Positive quantities are received at `adjustment_cost` (ADJ_IN);
    negative quantities are issued at the item's costing method (ADJ_OUT).
    """

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def execute(self, request: AdjustStockRequest) -> AdjustStockResult:
        """Execute adjustment use case."""
        if request.adjustment_qty == 0:
            raise InvalidQuantityError(
                "adjustment_qty", 0, message="Adjustment quantity cannot be zero"
            )

        notes = f"{request.reason}: {request.notes or ''}" if request.reason else request.notes
        posting_date = (
            date.fromisoformat(request.posting_date) if request.posting_date else None
        )
        ledger = await self._get_ledger()

        if request.adjustment_qty > 0:
            posting = await ledger.receive(
                request.item_id,
                request.adjustment_qty,
                request.adjustment_cost,
                movement_type=MovementType.ADJ_IN,
                warehouse_id=request.warehouse_id,
                reference="ADJ",
                notes=notes,
                posting_date=posting_date,
            )
            direction = MovementType.ADJ_IN
        else:
            posting = await ledger.issue(
                request.item_id,
                abs(request.adjustment_qty),
                movement_type=MovementType.ADJ_OUT,
                warehouse_id=request.warehouse_id,
                reference="ADJ",
                notes=notes,
                posting_date=posting_date,
            )
            direction = MovementType.ADJ_OUT

        logger.info(
            "stock_adjusted",
            item_id=request.item_id,
            direction=direction.value,
            quantity=request.adjustment_qty,
            new_qty=posting.state.quantity,
        )
        return AdjustStockResult(posting=posting, direction=direction)
