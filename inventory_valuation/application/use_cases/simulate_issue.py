"""Simulate Issue Use Case: dry-run COGS without recording a movement."""

from inventory_valuation.application.dto.requests import SimulateIssueRequest
from inventory_valuation.application.dto.responses import SimulateIssueResponse
from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.config import get_logger

logger = get_logger(__name__)


class SimulateIssueUseCase:
    """Compute what an issue would cost; nothing is persisted."""

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def execute(self, request: SimulateIssueRequest) -> SimulateIssueResponse:
        """Execute simulation use case."""
        ledger = await self._get_ledger()
        method, result = await ledger.simulate_issue(
            request.item_id,
            request.quantity,
            warehouse_id=request.warehouse_id,
            valuation_method=request.valuation_method,
        )

        logger.debug(
            "issue_simulated",
            item_id=request.item_id,
            method=method,
            cogs=result.cost_of_goods_sold,
        )

        return SimulateIssueResponse(
            item_id=request.item_id,
            warehouse_id=request.warehouse_id,
            valuation_method=method,
            quantity=request.quantity,
            rate=result.rate,
            cost_of_goods_sold=result.cost_of_goods_sold,
            remaining_quantity=result.new_quantity,
            remaining_value=result.new_value,
        )
