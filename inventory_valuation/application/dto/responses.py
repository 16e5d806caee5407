"""Response DTOs for the valuation ledger use cases."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from inventory_valuation.core.entities.inventory import ItemValuationState, ValuationEntry
from inventory_valuation.core.entities.valuation import StockBatch


class BatchResponse(BaseModel):
    """Cost layer response DTO."""

    quantity: float
    rate: float
    value: float
    received_date: date | None = None
    batch_number: str | None = None

    @classmethod
    def from_batch(cls, batch: StockBatch) -> "BatchResponse":
        return cls(
            quantity=batch.quantity,
            rate=batch.rate,
            value=batch.value,
            received_date=batch.received_date,
            batch_number=batch.batch_number,
        )


class ValuationStateResponse(BaseModel):
    """Item valuation state response DTO."""

    item_id: str
    warehouse_id: str | None = None
    valuation_method: str
    quantity: float
    rate: float
    value: float
    batches: list[BatchResponse]
    version: int
    updated_at: datetime

    @classmethod
    def from_state(
        cls, state: ItemValuationState, method: str
    ) -> "ValuationStateResponse":
        return cls(
            item_id=state.item_id,
            warehouse_id=state.warehouse_id,
            valuation_method=method,
            quantity=state.quantity,
            rate=state.rate,
            value=state.value,
            batches=[BatchResponse.from_batch(b) for b in state.queue],
            version=state.version,
            updated_at=state.updated_at,
        )


class ValuationEntryResponse(BaseModel):
    """Stock ledger entry response DTO."""

    id: int
    movement_type: str
    valuation_method: str
    quantity: float
    incoming_rate: float
    outgoing_rate: float
    cost_of_goods_sold: float
    qty_after_transaction: float
    valuation_rate: float
    stock_value: float
    stock_value_difference: float
    reference: str | None = None
    notes: str | None = None
    posting_date: date
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: ValuationEntry) -> "ValuationEntryResponse":
        return cls(
            id=entry.id,  # type: ignore[arg-type]
            movement_type=entry.movement_type.value,
            valuation_method=entry.valuation_method,
            quantity=entry.quantity,
            incoming_rate=entry.incoming_rate,
            outgoing_rate=entry.outgoing_rate,
            cost_of_goods_sold=entry.cost_of_goods_sold,
            qty_after_transaction=entry.qty_after_transaction,
            valuation_rate=entry.valuation_rate,
            stock_value=entry.stock_value,
            stock_value_difference=entry.stock_value_difference,
            reference=entry.reference,
            notes=entry.notes,
            posting_date=entry.posting_date,
            created_at=entry.created_at,
        )


class ReceiveStockResponse(BaseModel):
    """Response for stock receive operation."""

    state: ValuationStateResponse
    entry: ValuationEntryResponse
    created: bool = False  # True if this receipt created the item's state


class IssueStockResponse(BaseModel):
    """Response for stock issue operation."""

    state: ValuationStateResponse
    entry: ValuationEntryResponse
    cost_of_goods_sold: float


class TransferStockResponse(BaseModel):
    """Response for a warehouse transfer."""

    source: ValuationStateResponse
    destination: ValuationStateResponse
    transferred_value: float


class SimulateIssueResponse(BaseModel):
    """Dry-run COGS for a prospective issue."""

    item_id: str
    warehouse_id: str | None = None
    valuation_method: str
    quantity: float
    rate: float
    cost_of_goods_sold: float
    remaining_quantity: float
    remaining_value: float


class ItemValuationResponse(BaseModel):
    """Current valuation of one item with its cost layers and recent entries."""

    state: ValuationStateResponse
    recent_entries: list[ValuationEntryResponse]


class ItemValuationSummary(BaseModel):
    """One item's line in a valuation report."""

    item_id: str
    warehouse_id: str | None = None
    quantity: float
    rate: float
    value: float


class MethodValuationSummary(BaseModel):
    """Stock on hand valued under one costing method."""

    method: str
    items_count: int = 0
    total_quantity: float = 0.0
    total_value: float = 0.0
    items: list[ItemValuationSummary] = Field(default_factory=list)


class ValuationByMethodResponse(BaseModel):
    """Inventory valuation grouped by costing method, with overall totals."""

    by_method: list[MethodValuationSummary]
    total_items: int
    total_quantity: float
    total_value: float
