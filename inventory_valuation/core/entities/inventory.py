"""Inventory ledger entities: per-item valuation state and ledger entries."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from inventory_valuation.core.entities.valuation import BatchQueue


class MovementType(str, Enum):
    """Types of stock movements recorded on the ledger."""

    PURCHASE_IN = "PURCHASE_IN"
    PROD_IN = "PROD_IN"
    ADJ_IN = "ADJ_IN"
    TRANSFER_IN = "TRANSFER_IN"
    SALE_OUT = "SALE_OUT"
    MO_CONS = "MO_CONS"
    ADJ_OUT = "ADJ_OUT"
    TRANSFER_OUT = "TRANSFER_OUT"

    @property
    def is_incoming(self) -> bool:
        return self in _INCOMING


_INCOMING = {
    MovementType.PURCHASE_IN,
    MovementType.PROD_IN,
    MovementType.ADJ_IN,
    MovementType.TRANSFER_IN,
}


class ItemValuationState(BaseModel):
    """Authoritative valuation state of one item, optionally per warehouse."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    warehouse_id: str | None = None
    valuation_method: str | None = None  # None → settings default
    quantity: float = 0.0
    rate: float = 0.0
    value: float = 0.0
    queue: BatchQueue = ()
    version: int = 0
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def key(self) -> tuple[str, str | None]:
        return (self.item_id, self.warehouse_id)


class ValuationEntry(BaseModel):
    """A stock ledger entry produced by one valuation transaction."""

    id: int | None = None
    item_id: str
    warehouse_id: str | None = None
    movement_type: MovementType
    valuation_method: str
    quantity: float  # always positive
    incoming_rate: float = 0.0
    outgoing_rate: float = 0.0
    cost_of_goods_sold: float = 0.0
    qty_after_transaction: float
    valuation_rate: float
    stock_value: float
    stock_value_difference: float
    reference: str | None = None  # e.g., PO, SO or MO number
    notes: str | None = None
    posting_date: date = Field(default_factory=date.today)
    created_at: datetime = Field(default_factory=datetime.utcnow)
