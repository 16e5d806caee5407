"""
Domain exceptions for the inventory valuation engine.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class ValuationError(Exception):
    """Base exception for all valuation errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Stock Exceptions
class StockError(ValuationError):
    """Base exception for stock level problems."""

    pass


class InsufficientStockError(StockError):
    """Requested issue exceeds the quantity on hand."""

    def __init__(
        self,
        requested: float,
        available: float,
        item_id: str | None = None,
    ):
        subject = f" of item {item_id}" if item_id else ""
        super().__init__(
            f"Cannot issue {requested} units{subject}. Only {available} units available.",
            code="INSUFFICIENT_STOCK",
            details={
                "requested": requested,
                "available": available,
                "item_id": item_id,
            },
        )
        self.requested = requested
        self.available = available
        self.item_id = item_id


class InventoryItemNotFoundError(StockError):
    """No valuation state exists for the item."""

    def __init__(self, item_id: str, warehouse_id: str | None = None):
        where = f" in warehouse {warehouse_id}" if warehouse_id else ""
        super().__init__(
            f"Inventory item not found: {item_id}{where}",
            code="INVENTORY_ITEM_NOT_FOUND",
            details={"item_id": item_id, "warehouse_id": warehouse_id},
        )


class InvariantViolationError(StockError):
    """A valuation state broke one of its invariants."""

    def __init__(self, invariant: str, expected: Any, actual: Any):
        super().__init__(
            f"Invariant '{invariant}' violated: expected {expected}, got {actual}",
            code="INVARIANT_VIOLATION",
            details={"invariant": invariant, "expected": expected, "actual": actual},
        )


# Storage Exceptions
class StorageError(ValuationError):
    """Base exception for storage operations."""

    pass


class ConcurrencyConflictError(StorageError):
    """State was written by someone else since it was read."""

    def __init__(self, item_id: str, expected_version: int, actual_version: int):
        super().__init__(
            f"Valuation state of {item_id} changed concurrently "
            f"(expected version {expected_version}, found {actual_version})",
            code="CONCURRENCY_CONFLICT",
            details={
                "item_id": item_id,
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )


# Validation Exceptions
class ValidationError(ValuationError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidQuantityError(ValidationError):
    """Quantity is negative or not a finite number."""

    def __init__(self, field: str, value: Any, message: str = "must be a non-negative number"):
        super().__init__(field=field, message=message, value=value)
        self.code = "INVALID_QUANTITY"


class InvalidRateError(ValidationError):
    """Unit rate is negative or not a finite number."""

    def __init__(self, field: str, value: Any):
        super().__init__(field=field, message="must be a non-negative number", value=value)
        self.code = "INVALID_RATE"


class UnknownValuationMethodError(ValidationError):
    """Valuation method name is not one of the supported methods."""

    def __init__(self, method: Any, supported: list[str]):
        super().__init__(
            field="valuation_method",
            message=f"Unknown valuation method. Supported: {', '.join(supported)}",
            value=method,
        )
        self.code = "UNKNOWN_VALUATION_METHOD"
        self.details["supported"] = supported


class ConfigurationError(ValuationError):
    """Configuration error."""

    pass
