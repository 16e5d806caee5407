"""
Valuation strategy selector.

Maps a configured valuation method name to its strategy instance.
Unknown names fall back to Weighted Average; the fallback is logged so a
misspelt method in configuration shows up in the logs instead of silently
changing costs.
"""

from __future__ import annotations

from typing import Any

from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.valuation import ValuationMethod
from inventory_valuation.core.exceptions import UnknownValuationMethodError
from inventory_valuation.core.interfaces.valuation_strategy import IValuationStrategy
from inventory_valuation.core.services.valuation.average import (
    AverageCostValuationStrategy,
)
from inventory_valuation.core.services.valuation.layered import (
    FIFOValuationStrategy,
    LIFOValuationStrategy,
)

logger = get_logger(__name__)

FALLBACK_METHOD = ValuationMethod.WEIGHTED_AVERAGE


class ValuationStrategySelector:
    """Resolves method names to strategies, with a Weighted Average fallback."""

    def __init__(self) -> None:
        self._strategies: dict[ValuationMethod, IValuationStrategy] = {
            ValuationMethod.FIFO: FIFOValuationStrategy(),
            ValuationMethod.LIFO: LIFOValuationStrategy(),
            ValuationMethod.WEIGHTED_AVERAGE: AverageCostValuationStrategy(
                ValuationMethod.WEIGHTED_AVERAGE
            ),
            ValuationMethod.MOVING_AVERAGE: AverageCostValuationStrategy(
                ValuationMethod.MOVING_AVERAGE
            ),
        }

    def get_strategy(self, method: ValuationMethod | str | None) -> IValuationStrategy:
        """
        Get the strategy for a method name.

        Args:
            method: One of "FIFO", "LIFO", "Weighted Average",
                "Moving Average", or a ValuationMethod.

        Returns:
            The matching strategy, or the Weighted Average strategy when the
            name is not recognised.
        """
        resolved = _parse(method)
        if resolved is None:
            logger.warning(
                "valuation_method_fallback",
                requested=method,
                fallback=FALLBACK_METHOD.value,
            )
            resolved = FALLBACK_METHOD
        return self._strategies[resolved]

    def supported_methods(self) -> list[str]:
        return [m.value for m in self._strategies]

    def is_supported(self, method: Any) -> bool:
        return _parse(method) is not None

    def validate_method(self, method: Any) -> ValuationMethod:
        """Strict lookup for configuration boundaries; never falls back."""
        resolved = _parse(method)
        if resolved is None:
            raise UnknownValuationMethodError(method, self.supported_methods())
        return resolved


def _parse(method: Any) -> ValuationMethod | None:
    if isinstance(method, ValuationMethod):
        return method
    if not isinstance(method, str):
        return None
    try:
        return ValuationMethod(method)
    except ValueError:
        return None


# Singleton selector instance
valuation_strategy_selector = ValuationStrategySelector()


def get_strategy(method: ValuationMethod | str | None) -> IValuationStrategy:
    """Resolve a strategy through the shared selector."""
    return valuation_strategy_selector.get_strategy(method)
