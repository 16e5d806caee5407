"""
Valuation ledger.

Owns the read-compute-write cycle around the valuation engine: loads an
item's state, resolves its costing strategy, applies a receipt or issue,
checks invariants, persists the new state and records a ledger entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from inventory_valuation.application.locks import ItemLockRegistry
from inventory_valuation.config import Settings, get_logger, get_settings, item_context
from inventory_valuation.core.entities.inventory import (
    ItemValuationState,
    MovementType,
    ValuationEntry,
)
from inventory_valuation.core.entities.valuation import IncomingResult, OutgoingResult
from inventory_valuation.core.exceptions import (
    InsufficientStockError,
    InventoryItemNotFoundError,
)
from inventory_valuation.core.interfaces.valuation_store import IValuationStore
from inventory_valuation.core.interfaces.valuation_strategy import IValuationStrategy
from inventory_valuation.core.services.batch_queue import (
    QUANTITY_TOLERANCE,
    weighted_rate,
)
from inventory_valuation.core.services.invariants import check_result
from inventory_valuation.core.services.valuation import get_strategy

logger = get_logger(__name__)


@dataclass
class LedgerPosting:
    """State and ledger entry written by one transaction."""

    state: ItemValuationState
    entry: ValuationEntry
    created: bool = False
    previous: ItemValuationState | None = None  # None when the posting created the state


class ValuationLedger:
    """Applies stock movements to persisted valuation states."""

    def __init__(
        self,
        store: IValuationStore,
        locks: ItemLockRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._store = store
        self._locks = locks or ItemLockRegistry()
        self._settings = settings

    @property
    def store(self) -> IValuationStore:
        return self._store

    @property
    def locks(self) -> ItemLockRegistry:
        return self._locks

    def _get_settings(self) -> Settings:
        return self._settings or get_settings()

    def resolve_method(
        self,
        requested: str | None,
        state: ItemValuationState | None,
    ) -> str:
        """Method name for one transaction: request, then item, then default."""
        if requested:
            return requested
        if state is not None and state.valuation_method:
            return state.valuation_method
        return self._get_settings().valuation.default_method

    def strategy_for(
        self,
        requested: str | None,
        state: ItemValuationState | None,
    ) -> tuple[str, IValuationStrategy]:
        method_name = self.resolve_method(requested, state)
        return method_name, get_strategy(method_name)

    @staticmethod
    def _stored_method(state: ItemValuationState, method_name: str) -> str:
        # A per-call override only sticks when the item has no method yet
        return state.valuation_method or method_name

    async def receive(
        self,
        item_id: str,
        quantity: float,
        unit_cost: float,
        movement_type: MovementType = MovementType.PURCHASE_IN,
        warehouse_id: str | None = None,
        valuation_method: str | None = None,
        batch_number: str | None = None,
        reference: str | None = None,
        notes: str | None = None,
        posting_date: date | None = None,
    ) -> LedgerPosting:
        """Record a receipt under the item's lock."""
        async with self._locks.hold((item_id, warehouse_id)):
            return await self.receive_unlocked(
                item_id,
                quantity,
                unit_cost,
                movement_type=movement_type,
                warehouse_id=warehouse_id,
                valuation_method=valuation_method,
                batch_number=batch_number,
                reference=reference,
                notes=notes,
                posting_date=posting_date,
            )

    async def issue(
        self,
        item_id: str,
        quantity: float,
        movement_type: MovementType = MovementType.SALE_OUT,
        warehouse_id: str | None = None,
        valuation_method: str | None = None,
        reference: str | None = None,
        notes: str | None = None,
        posting_date: date | None = None,
    ) -> LedgerPosting:
        """Record an issue under the item's lock."""
        async with self._locks.hold((item_id, warehouse_id)):
            return await self.issue_unlocked(
                item_id,
                quantity,
                movement_type=movement_type,
                warehouse_id=warehouse_id,
                valuation_method=valuation_method,
                reference=reference,
                notes=notes,
                posting_date=posting_date,
            )

    async def receive_unlocked(
        self,
        item_id: str,
        quantity: float,
        unit_cost: float,
        movement_type: MovementType = MovementType.PURCHASE_IN,
        warehouse_id: str | None = None,
        valuation_method: str | None = None,
        batch_number: str | None = None,
        reference: str | None = None,
        notes: str | None = None,
        posting_date: date | None = None,
    ) -> LedgerPosting:
        """Record a receipt. The caller must hold the item's lock."""
        posting_date = posting_date or date.today()

        with item_context(item_id, warehouse_id):
            previous = await self._store.get_state(item_id, warehouse_id)
            prev = previous or ItemValuationState(item_id=item_id, warehouse_id=warehouse_id)

            method_name, strategy = self.strategy_for(valuation_method, prev)
            result = strategy.calculate_incoming(
                prev.quantity,
                prev.rate,
                prev.value,
                prev.queue,
                quantity,
                unit_cost,
                received_date=posting_date,
                batch_number=batch_number,
            )
            self._check(result, strategy)

            state = await self._store.save_state(
                prev.model_copy(
                    update={
                        "valuation_method": self._stored_method(prev, method_name),
                        "quantity": result.new_quantity,
                        "rate": result.new_rate,
                        "value": result.new_value,
                        "queue": result.new_queue,
                    }
                )
            )

            entry = await self._record(
                ValuationEntry(
                    item_id=item_id,
                    warehouse_id=warehouse_id,
                    movement_type=movement_type,
                    valuation_method=strategy.method.value,
                    quantity=quantity,
                    incoming_rate=unit_cost,
                    qty_after_transaction=state.quantity,
                    valuation_rate=state.rate,
                    stock_value=state.value,
                    stock_value_difference=state.value - prev.value,
                    reference=reference,
                    notes=notes,
                    posting_date=posting_date,
                ),
                previous=previous,
                saved=state,
            )

            logger.info(
                "stock_received",
                method=strategy.method.value,
                quantity=quantity,
                new_qty=state.quantity,
                new_rate=round(state.rate, 4),
            )

        return LedgerPosting(
            state=state,
            entry=entry,
            created=previous is None,
            previous=previous,
        )

    async def issue_unlocked(
        self,
        item_id: str,
        quantity: float,
        movement_type: MovementType = MovementType.SALE_OUT,
        warehouse_id: str | None = None,
        valuation_method: str | None = None,
        reference: str | None = None,
        notes: str | None = None,
        posting_date: date | None = None,
    ) -> LedgerPosting:
        """Record an issue. The caller must hold the item's lock."""
        posting_date = posting_date or date.today()

        with item_context(item_id, warehouse_id):
            prev = await self._store.get_state(item_id, warehouse_id)
            if prev is None:
                raise InventoryItemNotFoundError(item_id, warehouse_id)

            if quantity > prev.quantity + QUANTITY_TOLERANCE:
                raise InsufficientStockError(
                    requested=quantity,
                    available=prev.quantity,
                    item_id=item_id,
                )

            method_name, strategy = self.strategy_for(valuation_method, prev)
            result = strategy.calculate_outgoing(prev.quantity, prev.queue, quantity)
            self._check(result, strategy)

            state = await self._store.save_state(
                prev.model_copy(
                    update={
                        "valuation_method": self._stored_method(prev, method_name),
                        "quantity": result.new_quantity,
                        "rate": weighted_rate(result.new_queue),
                        "value": result.new_value,
                        "queue": result.new_queue,
                    }
                )
            )

            entry = await self._record(
                ValuationEntry(
                    item_id=item_id,
                    warehouse_id=warehouse_id,
                    movement_type=movement_type,
                    valuation_method=strategy.method.value,
                    quantity=quantity,
                    outgoing_rate=result.rate,
                    cost_of_goods_sold=result.cost_of_goods_sold,
                    qty_after_transaction=state.quantity,
                    valuation_rate=state.rate,
                    stock_value=state.value,
                    stock_value_difference=state.value - prev.value,
                    reference=reference,
                    notes=notes,
                    posting_date=posting_date,
                ),
                previous=prev,
                saved=state,
            )

            logger.info(
                "stock_issued",
                method=strategy.method.value,
                quantity=quantity,
                cogs=round(result.cost_of_goods_sold, 4),
                remaining_qty=state.quantity,
            )

        return LedgerPosting(state=state, entry=entry, previous=prev)

    async def revert_unlocked(self, posting: LedgerPosting) -> None:
        """
        Undo a posting: restore the state it replaced and drop its entry.

        The restored state is written as a new version on top of the
        posting's own. The caller must hold the item's lock.
        """
        state = posting.state
        with item_context(state.item_id, state.warehouse_id):
            await self._restore_state(posting.previous, state)
            if posting.entry.id is not None:
                await self._store.delete_entry(posting.entry.id)

            logger.warning(
                "posting_reverted",
                movement_type=posting.entry.movement_type.value,
                quantity=posting.entry.quantity,
            )

    async def simulate_issue(
        self,
        item_id: str,
        quantity: float,
        warehouse_id: str | None = None,
        valuation_method: str | None = None,
    ) -> tuple[str, OutgoingResult]:
        """Compute the outcome of an issue without persisting anything."""
        state = await self._store.get_state(item_id, warehouse_id)
        if state is None:
            raise InventoryItemNotFoundError(item_id, warehouse_id)

        if quantity > state.quantity + QUANTITY_TOLERANCE:
            raise InsufficientStockError(
                requested=quantity,
                available=state.quantity,
                item_id=item_id,
            )

        _, strategy = self.strategy_for(valuation_method, state)
        return strategy.method.value, strategy.calculate_outgoing(
            state.quantity, state.queue, quantity
        )

    async def _record(
        self,
        entry: ValuationEntry,
        previous: ItemValuationState | None,
        saved: ItemValuationState,
    ) -> ValuationEntry:
        """Add the entry for a saved state; restore the state if that fails."""
        try:
            return await self._store.add_entry(entry)
        except Exception:
            await self._restore_state(previous, saved)
            raise

    async def _restore_state(
        self,
        previous: ItemValuationState | None,
        saved: ItemValuationState,
    ) -> None:
        if previous is None:
            await self._store.delete_state(saved.item_id, saved.warehouse_id)
        else:
            await self._store.save_state(
                previous.model_copy(update={"version": saved.version})
            )

    def _check(
        self,
        result: IncomingResult | OutgoingResult,
        strategy: IValuationStrategy,
    ) -> None:
        valuation = self._get_settings().valuation
        if valuation.check_invariants:
            check_result(
                result,
                method=strategy.method,
                tolerance=valuation.quantity_tolerance,
            )
