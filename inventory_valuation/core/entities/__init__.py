"""Core domain entities."""

from inventory_valuation.core.entities.inventory import (
    ItemValuationState,
    MovementType,
    ValuationEntry,
)
from inventory_valuation.core.entities.valuation import (
    BatchQueue,
    IncomingResult,
    OutgoingResult,
    StockBatch,
    ValuationMethod,
)

__all__ = [
    # Valuation entities
    "StockBatch",
    "BatchQueue",
    "IncomingResult",
    "OutgoingResult",
    "ValuationMethod",
    # Ledger entities
    "ItemValuationState",
    "ValuationEntry",
    "MovementType",
]
