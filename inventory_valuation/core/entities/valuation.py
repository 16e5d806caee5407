"""Valuation domain entities: cost batches and calculation results."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ValuationMethod(str, Enum):
    """Supported inventory valuation methods (IAS 2)."""

    FIFO = "FIFO"
    LIFO = "LIFO"
    WEIGHTED_AVERAGE = "Weighted Average"
    MOVING_AVERAGE = "Moving Average"

    @property
    def arabic_label(self) -> str:
        """Display label used by Arabic-language screens."""
        return _ARABIC_LABELS[self]

    @property
    def is_layered(self) -> bool:
        """True when the method keeps discrete cost layers."""
        return self in (ValuationMethod.FIFO, ValuationMethod.LIFO)


_ARABIC_LABELS = {
    ValuationMethod.FIFO: "الوارد أولاً صادر أولاً",
    ValuationMethod.LIFO: "الوارد أخيراً صادر أولاً",
    ValuationMethod.WEIGHTED_AVERAGE: "المتوسط المرجح",
    ValuationMethod.MOVING_AVERAGE: "المتوسط المتحرك",
}


class StockBatch(BaseModel):
    """A cost layer: `quantity` units acquired at unit `rate`."""

    model_config = ConfigDict(frozen=True)

    quantity: float = Field(..., ge=0)
    rate: float = Field(..., ge=0)
    received_date: date | None = None
    batch_number: str | None = None

    @property
    def value(self) -> float:
        return self.quantity * self.rate


# Index 0 is the oldest layer
BatchQueue = tuple[StockBatch, ...]


class IncomingResult(BaseModel):
    """State after a receipt."""

    model_config = ConfigDict(frozen=True)

    new_quantity: float
    new_rate: float
    new_value: float
    new_queue: BatchQueue = ()


class OutgoingResult(BaseModel):
    """State after an issue, with the cost recognised for it."""

    model_config = ConfigDict(frozen=True)

    rate: float
    cost_of_goods_sold: float
    new_quantity: float
    new_value: float
    new_queue: BatchQueue = ()
