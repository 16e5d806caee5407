"""Unit tests for domain exceptions."""

import pytest

from inventory_valuation.core.exceptions import (
    ConcurrencyConflictError,
    ConfigurationError,
    InsufficientStockError,
    InvalidQuantityError,
    InvalidRateError,
    InvariantViolationError,
    InventoryItemNotFoundError,
    StockError,
    StorageError,
    UnknownValuationMethodError,
    ValidationError,
    ValuationError,
)


class TestValuationError:
    """Tests for base ValuationError exception."""

    def test_basic_initialization(self):
        error = ValuationError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "ValuationError"
        assert error.details == {}

    def test_to_dict(self):
        error = ValuationError("Test error", code="TEST_CODE", details={"extra": "info"})
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestStockErrors:
    """Tests for stock-level exceptions."""

    def test_insufficient_stock(self):
        error = InsufficientStockError(requested=100, available=50)
        assert error.code == "INSUFFICIENT_STOCK"
        assert "100" in error.message
        assert "50" in error.message
        assert error.requested == 100
        assert error.available == 50
        assert error.item_id is None

    def test_insufficient_stock_with_item(self):
        error = InsufficientStockError(requested=10, available=2, item_id="SKU-1")
        assert "SKU-1" in error.message
        assert error.details["item_id"] == "SKU-1"

    def test_item_not_found(self):
        error = InventoryItemNotFoundError("SKU-1", warehouse_id="WH-A")
        assert error.code == "INVENTORY_ITEM_NOT_FOUND"
        assert "WH-A" in error.message
        assert error.details == {"item_id": "SKU-1", "warehouse_id": "WH-A"}

    def test_invariant_violation(self):
        error = InvariantViolationError("quantity_conservation", 150, 149)
        assert error.code == "INVARIANT_VIOLATION"
        assert error.details["invariant"] == "quantity_conservation"


class TestValidationErrors:
    """Tests for input validation exceptions."""

    def test_invalid_quantity(self):
        error = InvalidQuantityError("incoming_quantity", -5)
        assert error.code == "INVALID_QUANTITY"
        assert "incoming_quantity" in error.message
        assert error.details["value"] == "-5"

    def test_invalid_quantity_zero_value_kept(self):
        error = InvalidQuantityError("adjustment_qty", 0, message="cannot be zero")
        assert error.details["value"] == "0"
        assert error.details["message"] == "cannot be zero"

    def test_invalid_rate(self):
        error = InvalidRateError("incoming_rate", -1.5)
        assert error.code == "INVALID_RATE"
        assert error.details["field"] == "incoming_rate"

    def test_unknown_method(self):
        error = UnknownValuationMethodError("BOGUS", ["FIFO", "LIFO"])
        assert error.code == "UNKNOWN_VALUATION_METHOD"
        assert error.details["value"] == "BOGUS"
        assert error.details["supported"] == ["FIFO", "LIFO"]


class TestExceptionHierarchy:
    """Tests for exception inheritance hierarchy."""

    @pytest.mark.parametrize(
        "exc, parent",
        [
            (InsufficientStockError(1, 0), StockError),
            (InventoryItemNotFoundError("x"), StockError),
            (InvariantViolationError("i", 1, 2), StockError),
            (ConcurrencyConflictError("x", 1, 2), StorageError),
            (InvalidQuantityError("q", -1), ValidationError),
            (InvalidRateError("r", -1), ValidationError),
            (UnknownValuationMethodError("m", []), ValidationError),
            (ConfigurationError("bad"), ValuationError),
        ],
    )
    def test_catchable_by_parent(self, exc, parent):
        assert isinstance(exc, parent)
        assert isinstance(exc, ValuationError)
        assert "error" in exc.to_dict()
