"""Get Valuation By Method Use Case: stock value grouped by costing method."""

from inventory_valuation.application.dto.responses import (
    ItemValuationSummary,
    MethodValuationSummary,
    ValuationByMethodResponse,
)
from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.inventory import ItemValuationState

logger = get_logger(__name__)

PAGE_SIZE = 500


class GetValuationByMethodUseCase:
    """
    Report inventory value per costing method.

    Items are grouped by their stored method, or the configured default
    when they have none. Names the selector does not recognise are
    reported under the name as stored.
    """

    def __init__(self, ledger: ValuationLedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ValuationLedger:
        if self._ledger is None:
            from inventory_valuation.application.services import get_valuation_ledger

            self._ledger = await get_valuation_ledger()
        return self._ledger

    async def _all_states(self, ledger: ValuationLedger) -> list[ItemValuationState]:
        states: list[ItemValuationState] = []
        offset = 0
        while True:
            page = await ledger.store.list_states(limit=PAGE_SIZE, offset=offset)
            states.extend(page)
            if len(page) < PAGE_SIZE:
                return states
            offset += PAGE_SIZE

    async def execute(self) -> ValuationByMethodResponse:
        """Execute valuation report use case."""
        ledger = await self._get_ledger()
        states = await self._all_states(ledger)

        groups: dict[str, MethodValuationSummary] = {}
        for state in states:
            method = ledger.resolve_method(None, state)
            group = groups.setdefault(method, MethodValuationSummary(method=method))
            group.items_count += 1
            group.total_quantity += state.quantity
            group.total_value += state.value
            group.items.append(
                ItemValuationSummary(
                    item_id=state.item_id,
                    warehouse_id=state.warehouse_id,
                    quantity=state.quantity,
                    rate=state.rate,
                    value=state.value,
                )
            )

        response = ValuationByMethodResponse(
            by_method=sorted(groups.values(), key=lambda g: g.method),
            total_items=len(states),
            total_quantity=sum(s.quantity for s in states),
            total_value=sum(s.value for s in states),
        )

        logger.info(
            "valuation_by_method_built",
            methods=len(response.by_method),
            total_items=response.total_items,
            total_value=round(response.total_value, 4),
        )
        return response
