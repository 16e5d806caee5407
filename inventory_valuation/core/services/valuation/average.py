"""
Average costing: Weighted Average and Moving Average.

Every receipt re-blends the stock on hand into a single running average
rate, so the queue holds at most one batch. Moving Average is the same
algorithm under a different method tag.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from inventory_valuation.core.entities.valuation import (
    BatchQueue,
    IncomingResult,
    OutgoingResult,
    StockBatch,
    ValuationMethod,
)
from inventory_valuation.core.exceptions import ConfigurationError
from inventory_valuation.core.services.batch_queue import (
    QUANTITY_TOLERANCE,
    coerce_queue,
    weighted_rate,
)
from inventory_valuation.core.services.valuation.base import BaseValuationStrategy

AVERAGE_METHODS = (ValuationMethod.WEIGHTED_AVERAGE, ValuationMethod.MOVING_AVERAGE)


def _single_batch(quantity: float, rate: float) -> BatchQueue:
    if quantity <= 0:
        return ()
    return (StockBatch(quantity=quantity, rate=rate),)


class AverageCostValuationStrategy(BaseValuationStrategy):
    """Running average cost; one instance per average method tag."""

    def __init__(self, method: ValuationMethod = ValuationMethod.WEIGHTED_AVERAGE) -> None:
        if method not in AVERAGE_METHODS:
            raise ConfigurationError(f"{method.value} is not an average costing method")
        super().__init__(method)

    def _receive(
        self,
        prev_quantity: float,
        prev_value: float,
        queue: BatchQueue,
        incoming_quantity: float,
        incoming_rate: float,
        *,
        received_date: date | None,
        batch_number: str | None,
    ) -> IncomingResult:
        new_quantity = prev_quantity + incoming_quantity
        new_value = prev_value + incoming_quantity * incoming_rate
        new_rate = new_value / new_quantity if new_quantity > 0 else 0.0

        return IncomingResult(
            new_quantity=new_quantity,
            new_rate=new_rate,
            new_value=new_value,
            new_queue=_single_batch(new_quantity, new_rate),
        )

    def _issue(
        self,
        current_quantity: float,
        queue: BatchQueue,
        outgoing_quantity: float,
    ) -> OutgoingResult:
        rate = self.current_rate(queue)
        cost = outgoing_quantity * rate

        new_quantity = current_quantity - outgoing_quantity
        if new_quantity <= QUANTITY_TOLERANCE:
            new_quantity = 0.0

        return OutgoingResult(
            rate=rate,
            cost_of_goods_sold=cost,
            new_quantity=new_quantity,
            new_value=new_quantity * rate,
            new_queue=_single_batch(new_quantity, rate),
        )

    def current_rate(self, queue: Iterable[StockBatch]) -> float:
        # A single batch in normal operation; several only right after the
        # item switched over from a layered method
        return weighted_rate(coerce_queue(queue))
