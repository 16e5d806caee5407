"""Issue Stock Use Case: OUT movement with balance check and COGS."""

from dataclasses import dataclass
from datetime import date

from inventory_valuation.application.dto.requests import IssueStockRequest
from inventory_valuation.application.dto.responses import (
    IssueStockResponse,
    ValuationEntryResponse,
    ValuationStateResponse,
)
from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.inventory import ItemValuationState, ValuationEntry

logger = get_logger(__name__)


@dataclass
class IssueStockResult:
    """Result of issuing stock."""

    state: ItemValuationState
    entry: ValuationEntry

    @property
    def cost_of_goods_sold(self) -> float:
        return self.entry.cost_of_goods_sold


class IssueStockUseCase:
    """Issue stock (OUT movement) and recognise its cost of goods sold."""

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def execute(self, request: IssueStockRequest) -> IssueStockResult:
        """Execute issue stock use case."""
        logger.info(
            "issue_stock_started",
            item_id=request.item_id,
            warehouse_id=request.warehouse_id,
            quantity=request.quantity,
        )

        ledger = await self._get_ledger()
        posting = await ledger.issue(
            request.item_id,
            request.quantity,
            movement_type=request.movement_type,
            warehouse_id=request.warehouse_id,
            valuation_method=request.valuation_method,
            reference=request.reference,
            notes=request.notes,
            posting_date=(
                date.fromisoformat(request.posting_date) if request.posting_date else None
            ),
        )

        logger.info(
            "issue_stock_complete",
            item_id=posting.state.item_id,
            cogs=round(posting.entry.cost_of_goods_sold, 4),
            remaining_qty=posting.state.quantity,
        )

        return IssueStockResult(state=posting.state, entry=posting.entry)

    def to_response(self, result: IssueStockResult) -> IssueStockResponse:
        """Convert result to API response."""
        return IssueStockResponse(
            state=ValuationStateResponse.from_state(
                result.state, result.entry.valuation_method
            ),
            entry=ValuationEntryResponse.from_entry(result.entry),
            cost_of_goods_sold=result.cost_of_goods_sold,
        )
