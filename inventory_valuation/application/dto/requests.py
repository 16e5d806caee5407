"""
Request DTOs for the valuation ledger use cases.

Pydantic models for validating incoming stock movements.
"""

from pydantic import BaseModel, Field, model_validator

from inventory_valuation.core.entities.inventory import MovementType


class ReceiveStockRequest(BaseModel):
    """Request to receive stock (IN movement)."""

    item_id: str = Field(..., min_length=1, description="Item / product ID")
    warehouse_id: str | None = Field(default=None, description="Warehouse scope")
    quantity: float = Field(..., gt=0, description="Quantity to receive")
    unit_cost: float = Field(..., ge=0, description="Cost per unit")
    movement_type: MovementType = Field(
        default=MovementType.PURCHASE_IN, description="Kind of receipt"
    )
    valuation_method: str | None = Field(
        default=None,
        description=(
            "Valuation method; defaults to the item's or the configured one. "
            "Stored on the item only when it has no method yet"
        ),
    )
    batch_number: str | None = Field(default=None, description="Lot / batch number")
    reference: str | None = Field(default=None, description="PO, MO or invoice reference")
    notes: str | None = Field(default=None, description="Additional notes")
    posting_date: str | None = Field(
        default=None,
        description="Posting date in ISO format (defaults to today)",
    )

    @model_validator(mode="after")
    def check_incoming_type(self) -> "ReceiveStockRequest":
        if not self.movement_type.is_incoming:
            raise ValueError(f"{self.movement_type.value} is not an incoming movement")
        return self


class IssueStockRequest(BaseModel):
    """Request to issue stock (OUT movement)."""

    item_id: str = Field(..., min_length=1, description="Item / product ID")
    warehouse_id: str | None = Field(default=None, description="Warehouse scope")
    quantity: float = Field(..., gt=0, description="Quantity to issue")
    movement_type: MovementType = Field(
        default=MovementType.SALE_OUT, description="Kind of issue"
    )
    valuation_method: str | None = Field(
        default=None,
        description="Method for this issue only; the item keeps its own method",
    )
    reference: str | None = Field(default=None, description="SO or MO reference")
    notes: str | None = Field(default=None, description="Additional notes")
    posting_date: str | None = Field(
        default=None,
        description="Posting date in ISO format (defaults to today)",
    )

    @model_validator(mode="after")
    def check_outgoing_type(self) -> "IssueStockRequest":
        if self.movement_type.is_incoming:
            raise ValueError(f"{self.movement_type.value} is not an outgoing movement")
        return self


class AdjustStockRequest(BaseModel):
    """Request for a positive or negative stock adjustment."""

    item_id: str = Field(..., min_length=1, description="Item / product ID")
    warehouse_id: str | None = Field(default=None, description="Warehouse scope")
    adjustment_qty: float = Field(..., description="Signed quantity; negative removes stock")
    adjustment_cost: float = Field(
        default=0.0, ge=0, description="Unit cost for positive adjustments"
    )
    reason: str | None = Field(default=None, description="Adjustment reason")
    notes: str | None = Field(default=None, description="Additional notes")
    posting_date: str | None = Field(default=None, description="Posting date in ISO format")


class TransferStockRequest(BaseModel):
    """Request to move stock between two warehouses at its carrying cost."""

    item_id: str = Field(..., min_length=1, description="Item / product ID")
    from_warehouse_id: str | None = Field(default=None, description="Source warehouse")
    to_warehouse_id: str | None = Field(default=None, description="Destination warehouse")
    quantity: float = Field(..., gt=0, description="Quantity to transfer")
    reference: str | None = Field(default=None, description="Transfer reference")
    notes: str | None = Field(default=None, description="Additional notes")
    posting_date: str | None = Field(default=None, description="Posting date in ISO format")

    @model_validator(mode="after")
    def check_distinct_warehouses(self) -> "TransferStockRequest":
        if self.from_warehouse_id == self.to_warehouse_id:
            raise ValueError("Source and destination warehouse must differ")
        return self


class SimulateIssueRequest(BaseModel):
    """Request to compute COGS for an issue without recording it."""

    item_id: str = Field(..., min_length=1, description="Item / product ID")
    warehouse_id: str | None = Field(default=None, description="Warehouse scope")
    quantity: float = Field(..., gt=0, description="Quantity to simulate")
    valuation_method: str | None = Field(default=None, description="Method for this simulation only")
