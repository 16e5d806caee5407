"""
Layered costing: FIFO and LIFO.

Both methods keep every receipt as its own cost layer at the tail of the
queue. They differ only in which end of the queue an issue consumes.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from inventory_valuation.config import get_logger
from inventory_valuation.core.entities.valuation import (
    BatchQueue,
    IncomingResult,
    OutgoingResult,
    StockBatch,
    ValuationMethod,
)
from inventory_valuation.core.exceptions import InvariantViolationError
from inventory_valuation.core.services.batch_queue import (
    QUANTITY_TOLERANCE,
    append_batch,
    coerce_queue,
    total_quantity,
    total_value,
    weighted_rate,
)
from inventory_valuation.core.services.valuation.base import BaseValuationStrategy

logger = get_logger(__name__)


def consume_layers(
    queue: BatchQueue,
    quantity: float,
    newest_first: bool,
) -> tuple[float, BatchQueue]:
    """
    Take `quantity` units out of the queue layer by layer.

    Each layer gives ``min(layer.quantity, remaining)`` units at its own
    rate. A partly consumed layer keeps its position and rate; a layer left
    with no more than QUANTITY_TOLERANCE units is dropped.

    Returns:
        (cost of the units taken, remaining queue)
    """
    remaining = quantity
    cost = 0.0
    kept: list[StockBatch] = []

    ordered = reversed(queue) if newest_first else iter(queue)
    for batch in ordered:
        if remaining <= 0:
            kept.append(batch)
            continue

        take = min(batch.quantity, remaining)
        cost += take * batch.rate
        remaining -= take

        left = batch.quantity - take
        if left > QUANTITY_TOLERANCE:
            kept.append(batch.model_copy(update={"quantity": left}))

    if remaining > QUANTITY_TOLERANCE:
        # Caller's quantity was larger than what its queue actually holds
        raise InvariantViolationError(
            "queue_covers_quantity",
            expected=quantity,
            actual=quantity - remaining,
        )

    if newest_first:
        kept.reverse()
    return cost, tuple(kept)


class LayeredValuationStrategy(BaseValuationStrategy):
    """Common receipt logic for FIFO and LIFO."""

    newest_first: bool = False

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
        # The queue is authoritative; prev_quantity/prev_value are not trusted
        new_queue = append_batch(
            queue,
            incoming_quantity,
            incoming_rate,
            received_date=received_date,
            batch_number=batch_number,
        )
        return IncomingResult(
            new_quantity=total_quantity(new_queue),
            new_rate=weighted_rate(new_queue),  # reporting only
            new_value=total_value(new_queue),
            new_queue=new_queue,
        )

    def _issue(
        self,
        current_quantity: float,
        queue: BatchQueue,
        outgoing_quantity: float,
    ) -> OutgoingResult:
        cost, new_queue = consume_layers(queue, outgoing_quantity, self.newest_first)

        logger.debug(
            "layered_issue",
            method=self.method.value,
            outgoing_qty=outgoing_quantity,
            cogs=cost,
            layers_before=len(queue),
            layers_after=len(new_queue),
        )

        return OutgoingResult(
            rate=cost / outgoing_quantity,
            cost_of_goods_sold=cost,
            new_quantity=total_quantity(new_queue),
            new_value=total_value(new_queue),
            new_queue=new_queue,
        )


class FIFOValuationStrategy(LayeredValuationStrategy):
    """First In, First Out: issues consume the oldest layers first."""

    newest_first = False

    def __init__(self) -> None:
        super().__init__(ValuationMethod.FIFO)

    def current_rate(self, queue: Iterable[StockBatch]) -> float:
        batches = coerce_queue(queue)
        return batches[0].rate if batches else 0.0


class LIFOValuationStrategy(LayeredValuationStrategy):
    """Last In, First Out: issues consume the newest layers first."""

    newest_first = True

    def __init__(self) -> None:
        super().__init__(ValuationMethod.LIFO)

    def current_rate(self, queue: Iterable[StockBatch]) -> float:
        batches = coerce_queue(queue)
        return batches[-1].rate if batches else 0.0
