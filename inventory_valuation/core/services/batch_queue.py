"""
Batch queue helpers.

Pure functions over immutable queues of StockBatch. Index 0 is the oldest
layer, the last index the newest.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from inventory_valuation.core.entities.valuation import BatchQueue, StockBatch
from inventory_valuation.core.exceptions import InvalidQuantityError, InvalidRateError

# Quantities closer than this are treated as equal
QUANTITY_TOLERANCE = 1e-6


def total_quantity(queue: Iterable[StockBatch]) -> float:
    """Sum of batch quantities."""
    return sum(batch.quantity for batch in queue)


def total_value(queue: Iterable[StockBatch]) -> float:
    """Sum of quantity × rate over all batches."""
    return sum(batch.quantity * batch.rate for batch in queue)


def weighted_rate(queue: Iterable[StockBatch]) -> float:
    """Weighted average rate of the queue, 0 when it holds nothing."""
    batches = tuple(queue)
    qty = total_quantity(batches)
    if qty <= 0:
        return 0.0
    return total_value(batches) / qty


def append_batch(
    queue: Iterable[StockBatch],
    quantity: float,
    rate: float,
    received_date: date | None = None,
    batch_number: str | None = None,
) -> BatchQueue:
    """Return a new queue with a batch added at the tail."""
    batches = tuple(queue)
    if quantity <= 0:
        return batches
    return batches + (
        StockBatch(
            quantity=quantity,
            rate=rate,
            received_date=received_date,
            batch_number=batch_number,
        ),
    )


def coerce_queue(raw: Iterable[Any] | None) -> BatchQueue:
    """
    Normalise a queue from storage into a tuple of StockBatch.

    Accepts StockBatch instances, ``(quantity, rate)`` pairs as kept in a
    ``stock_queue`` column, or mappings with ``quantity``/``qty`` and
    ``rate`` keys. Zero-quantity entries are dropped.
    """
    if raw is None:
        return ()

    batches: list[StockBatch] = []
    for entry in raw:
        if isinstance(entry, StockBatch):
            batch = entry
        elif isinstance(entry, Mapping):
            data = dict(entry)
            if "quantity" not in data and "qty" in data:
                data["quantity"] = data.pop("qty")
            batch = StockBatch.model_validate(data)
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            batch = StockBatch(quantity=entry[0], rate=entry[1])
        else:
            raise TypeError(f"Cannot read stock batch from {entry!r}")

        if batch.quantity > 0:
            batches.append(batch)
    return tuple(batches)


def require_quantity(field: str, value: float) -> float:
    """Reject negative or non-finite quantities."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidQuantityError(field, value, message="must be a number")
    if not math.isfinite(value) or value < 0:
        raise InvalidQuantityError(field, value)
    return float(value)


def require_rate(field: str, value: float) -> float:
    """Reject negative or non-finite unit rates."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidRateError(field, value)
    if not math.isfinite(value) or value < 0:
        raise InvalidRateError(field, value)
    return float(value)
