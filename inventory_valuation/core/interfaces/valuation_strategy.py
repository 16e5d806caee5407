"""Abstract interface for inventory valuation strategies."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from inventory_valuation.core.entities.valuation import (
    IncomingResult,
    OutgoingResult,
    StockBatch,
    ValuationMethod,
)


class IValuationStrategy(ABC):
    """
    Contract shared by every costing method.

    Implementations are stateless and pure: the same inputs always
    produce the same result, and input queues are never mutated.
    """

    @property
    @abstractmethod
    def method(self) -> ValuationMethod:
        """Method tag of this strategy."""
        pass

    @abstractmethod
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
        """Compute the state after receiving stock."""
        pass

    @abstractmethod
    def calculate_outgoing(
        self,
        current_quantity: float,
        current_queue: Iterable[StockBatch],
        outgoing_quantity: float,
    ) -> OutgoingResult:
        """Compute the state and cost of goods sold after issuing stock."""
        pass

    @abstractmethod
    def current_rate(self, queue: Iterable[StockBatch]) -> float:
        """Rate that would apply to the next issue."""
        pass
