"""State invariant checks for item valuation states."""

from __future__ import annotations

import math
from collections.abc import Iterable

from inventory_valuation.core.entities.valuation import (
    IncomingResult,
    OutgoingResult,
    StockBatch,
    ValuationMethod,
)
from inventory_valuation.core.exceptions import InvariantViolationError
from inventory_valuation.core.services.batch_queue import (
    QUANTITY_TOLERANCE,
    total_quantity,
    total_value,
)
from inventory_valuation.core.services.valuation.average import AVERAGE_METHODS


def _close(a: float, b: float, tolerance: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=tolerance)


def check_state(
    quantity: float,
    value: float,
    queue: Iterable[StockBatch],
    method: ValuationMethod | None = None,
    rate: float | None = None,
    tolerance: float = QUANTITY_TOLERANCE,
) -> None:
    """
    Raise InvariantViolationError unless the state is consistent.

    Checks conservation of quantity and value against the queue,
    non-negative quantity, no zero-quantity batches, and for the average
    methods a single-batch queue with `rate == value / quantity`.
    """
    batches = tuple(queue)

    if quantity < -tolerance:
        raise InvariantViolationError("non_negative_quantity", ">= 0", quantity)

    queue_qty = total_quantity(batches)
    if not _close(quantity, queue_qty, tolerance):
        raise InvariantViolationError("quantity_conservation", queue_qty, quantity)

    queue_value = total_value(batches)
    if not _close(value, queue_value, tolerance):
        raise InvariantViolationError("value_conservation", queue_value, value)

    if any(batch.quantity <= 0 for batch in batches):
        raise InvariantViolationError("no_empty_batches", "quantity > 0", "empty batch")

    if method in AVERAGE_METHODS:
        if len(batches) > 1:
            raise InvariantViolationError("single_average_batch", "<= 1", len(batches))
        if rate is not None:
            expected = value / quantity if quantity > tolerance else 0.0
            if not _close(rate, expected, tolerance):
                raise InvariantViolationError("average_rate", expected, rate)


def check_result(
    result: IncomingResult | OutgoingResult,
    method: ValuationMethod | None = None,
    tolerance: float = QUANTITY_TOLERANCE,
) -> None:
    """Check the state carried by a strategy result."""
    rate = result.new_rate if isinstance(result, IncomingResult) else None
    check_state(
        result.new_quantity,
        result.new_value,
        result.new_queue,
        method=method,
        rate=rate,
        tolerance=tolerance,
    )
