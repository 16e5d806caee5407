"""Core services: batch queue helpers, valuation strategies and invariant checks."""

from inventory_valuation.core.services.batch_queue import (
    QUANTITY_TOLERANCE,
    append_batch,
    coerce_queue,
    total_quantity,
    total_value,
    weighted_rate,
)
from inventory_valuation.core.services.invariants import check_result, check_state
from inventory_valuation.core.services.valuation import (
    AverageCostValuationStrategy,
    FIFOValuationStrategy,
    LIFOValuationStrategy,
    ValuationStrategySelector,
    get_strategy,
    valuation_strategy_selector,
)

__all__ = [
    # Batch queue
    "QUANTITY_TOLERANCE",
    "total_quantity",
    "total_value",
    "weighted_rate",
    "append_batch",
    "coerce_queue",
    # Strategies
    "FIFOValuationStrategy",
    "LIFOValuationStrategy",
    "AverageCostValuationStrategy",
    "ValuationStrategySelector",
    "valuation_strategy_selector",
    "get_strategy",
    # Invariants
    "check_state",
    "check_result",
]
