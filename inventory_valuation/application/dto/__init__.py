"""Data transfer objects for the application layer."""

from inventory_valuation.application.dto.requests import (
    AdjustStockRequest,
    IssueStockRequest,
    ReceiveStockRequest,
    SimulateIssueRequest,
    TransferStockRequest,
)
from inventory_valuation.application.dto.responses import (
    BatchResponse,
    IssueStockResponse,
    ItemValuationResponse,
    ItemValuationSummary,
    MethodValuationSummary,
    ReceiveStockResponse,
    SimulateIssueResponse,
    TransferStockResponse,
    ValuationByMethodResponse,
    ValuationEntryResponse,
    ValuationStateResponse,
)

__all__ = [
    # Requests
    "ReceiveStockRequest",
    "IssueStockRequest",
    "AdjustStockRequest",
    "TransferStockRequest",
    "SimulateIssueRequest",
    # Responses
    "BatchResponse",
    "ValuationStateResponse",
    "ValuationEntryResponse",
    "ReceiveStockResponse",
    "IssueStockResponse",
    "TransferStockResponse",
    "SimulateIssueResponse",
    "ItemValuationResponse",
    "ItemValuationSummary",
    "MethodValuationSummary",
    "ValuationByMethodResponse",
]
