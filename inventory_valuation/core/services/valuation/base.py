"""
Shared template for valuation strategies.

Validates inputs, enforces the stock-level precondition and short-circuits
zero-quantity movements before a concrete method sees them.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from datetime import date

from inventory_valuation.core.entities.valuation import (
    BatchQueue,
    IncomingResult,
    OutgoingResult,
    StockBatch,
    ValuationMethod,
)
from inventory_valuation.core.exceptions import InsufficientStockError
from inventory_valuation.core.interfaces.valuation_strategy import IValuationStrategy
from inventory_valuation.core.services.batch_queue import (
    QUANTITY_TOLERANCE,
    coerce_queue,
    require_quantity,
    require_rate,
    total_value,
)


class BaseValuationStrategy(IValuationStrategy):
    """Template method base: subclasses implement `_receive` and `_issue`."""

    def __init__(self, method: ValuationMethod) -> None:
        self._method = method

    @property
    def method(self) -> ValuationMethod:
        return self._method

    def calculate_incoming(
        self,
        prev_quantity: float,
        prev_rate: float,
        prev_value: float,
        prev_queue: Iterable[StockBatch],
        incoming_quantity: float,
        incoming_rate: float,
        *,
        received_date: date | None = None,
        batch_number: str | None = None,
    ) -> IncomingResult:
        prev_quantity = require_quantity("prev_quantity", prev_quantity)
        prev_rate = require_rate("prev_rate", prev_rate)
        prev_value = require_quantity("prev_value", prev_value)
        incoming_quantity = require_quantity("incoming_quantity", incoming_quantity)
        incoming_rate = require_rate("incoming_rate", incoming_rate)
        queue = coerce_queue(prev_queue)

        if incoming_quantity == 0:
            return IncomingResult(
                new_quantity=prev_quantity,
                new_rate=prev_rate,
                new_value=prev_value,
                new_queue=queue,
            )

        return self._receive(
            prev_quantity,
            prev_value,
            queue,
            incoming_quantity,
            incoming_rate,
            received_date=received_date,
            batch_number=batch_number,
        )

    def calculate_outgoing(
        self,
        current_quantity: float,
        current_queue: Iterable[StockBatch],
        outgoing_quantity: float,
    ) -> OutgoingResult:
        current_quantity = require_quantity("current_quantity", current_quantity)
        outgoing_quantity = require_quantity("outgoing_quantity", outgoing_quantity)
        queue = coerce_queue(current_queue)

        if outgoing_quantity > current_quantity + QUANTITY_TOLERANCE:
            raise InsufficientStockError(
                requested=outgoing_quantity,
                available=current_quantity,
            )

        if outgoing_quantity == 0:
            return OutgoingResult(
                rate=0.0,
                cost_of_goods_sold=0.0,
                new_quantity=current_quantity,
                new_value=total_value(queue),
                new_queue=queue,
            )

        return self._issue(current_quantity, queue, outgoing_quantity)

    @abstractmethod
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
        """Apply a validated, non-zero receipt."""

    @abstractmethod
    def _issue(
        self,
        current_quantity: float,
        queue: BatchQueue,
        outgoing_quantity: float,
    ) -> OutgoingResult:
        """Apply a validated, non-zero issue that fits the stock on hand."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self._method.value!r})"
