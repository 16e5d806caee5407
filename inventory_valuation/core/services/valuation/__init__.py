"""Valuation strategies and the selector between them."""

from inventory_valuation.core.services.valuation.average import (
    AVERAGE_METHODS,
    AverageCostValuationStrategy,
)
from inventory_valuation.core.services.valuation.base import BaseValuationStrategy
from inventory_valuation.core.services.valuation.layered import (
    FIFOValuationStrategy,
    LIFOValuationStrategy,
    LayeredValuationStrategy,
    consume_layers,
)
from inventory_valuation.core.services.valuation.selector import (
    FALLBACK_METHOD,
    ValuationStrategySelector,
    get_strategy,
    valuation_strategy_selector,
)

__all__ = [
    "BaseValuationStrategy",
    "LayeredValuationStrategy",
    "FIFOValuationStrategy",
    "LIFOValuationStrategy",
    "AverageCostValuationStrategy",
    "AVERAGE_METHODS",
    "consume_layers",
    "ValuationStrategySelector",
    "valuation_strategy_selector",
    "get_strategy",
    "FALLBACK_METHOD",
]
