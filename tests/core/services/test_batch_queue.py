"""Tests for batch queue helpers."""

import math

import pytest

from inventory_valuation.core.entities.valuation import StockBatch
from inventory_valuation.core.exceptions import InvalidQuantityError, InvalidRateError
from inventory_valuation.core.services.batch_queue import (
    append_batch,
    coerce_queue,
    require_quantity,
    require_rate,
    total_quantity,
    total_value,
    weighted_rate,
)


class TestTotals:
    """Tests for total_quantity, total_value and weighted_rate."""

    def test_totals(self, two_layer_queue):
        assert total_quantity(two_layer_queue) == 150
        assert total_value(two_layer_queue) == 7250

    def test_weighted_rate(self, two_layer_queue):
        assert weighted_rate(two_layer_queue) == pytest.approx(48.3333, rel=1e-4)

    def test_empty_queue(self):
        assert total_quantity(()) == 0
        assert total_value(()) == 0
        assert weighted_rate(()) == 0.0

    def test_accepts_generators(self, two_layer_queue):
        assert weighted_rate(b for b in two_layer_queue) == pytest.approx(7250 / 150)


class TestAppendBatch:
    """Tests for append_batch."""

    def test_appends_at_tail(self, two_layer_queue):
        result = append_batch(two_layer_queue, 10, 60, batch_number="LOT-3")
        assert len(result) == 3
        assert result[-1] == StockBatch(quantity=10, rate=60, batch_number="LOT-3")

    def test_does_not_touch_input(self, two_layer_queue):
        before = tuple(two_layer_queue)
        append_batch(two_layer_queue, 10, 60)
        assert two_layer_queue == before

    def test_zero_quantity_is_noop(self, two_layer_queue):
        assert append_batch(two_layer_queue, 0, 60) == two_layer_queue

    def test_list_input_returns_tuple(self):
        result = append_batch([StockBatch(quantity=1, rate=2)], 3, 4)
        assert isinstance(result, tuple)


class TestCoerceQueue:
    """Tests for reading queues stored in other shapes."""

    def test_none(self):
        assert coerce_queue(None) == ()

    def test_pairs(self):
        result = coerce_queue([[100, 45], (50, 55)])
        assert result == (
            StockBatch(quantity=100, rate=45),
            StockBatch(quantity=50, rate=55),
        )

    def test_mappings_with_qty_key(self):
        result = coerce_queue([{"qty": 10, "rate": 2.5}, {"quantity": 5, "rate": 3}])
        assert [b.quantity for b in result] == [10, 5]
        assert [b.rate for b in result] == [2.5, 3]

    def test_drops_empty_batches(self):
        result = coerce_queue([(0, 45), (10, 50)])
        assert len(result) == 1
        assert result[0].quantity == 10

    def test_passes_batches_through(self, two_layer_queue):
        assert coerce_queue(two_layer_queue) == two_layer_queue

    def test_rejects_garbage(self):
        with pytest.raises(TypeError):
            coerce_queue(["not a batch"])


class TestValidation:
    """Tests for quantity and rate guards."""

    @pytest.mark.parametrize("value", [0, 1, 2.5, 1e9])
    def test_valid_quantity(self, value):
        assert require_quantity("qty", value) == float(value)

    @pytest.mark.parametrize("value", [-1, -0.0001, math.inf, math.nan])
    def test_invalid_quantity(self, value):
        with pytest.raises(InvalidQuantityError) as exc_info:
            require_quantity("qty", value)
        assert exc_info.value.code == "INVALID_QUANTITY"
        assert exc_info.value.details["field"] == "qty"

    def test_non_numeric_quantity(self):
        with pytest.raises(InvalidQuantityError):
            require_quantity("qty", "10")  # type: ignore[arg-type]

    def test_bool_is_not_a_quantity(self):
        with pytest.raises(InvalidQuantityError):
            require_quantity("qty", True)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [-5, math.inf])
    def test_invalid_rate(self, value):
        with pytest.raises(InvalidRateError) as exc_info:
            require_rate("rate", value)
        assert exc_info.value.code == "INVALID_RATE"

    def test_zero_rate_allowed(self):
        assert require_rate("rate", 0) == 0.0
