"""Application use cases."""

from inventory_valuation.application.use_cases.adjust_stock import (
    AdjustStockResult,
    AdjustStockUseCase,
)
from inventory_valuation.application.use_cases.get_item_valuation import GetItemValuationUseCase
from inventory_valuation.application.use_cases.get_valuation_by_method import (
    GetValuationByMethodUseCase,
)
from inventory_valuation.application.use_cases.issue_stock import (
    IssueStockResult,
    IssueStockUseCase,
)
from inventory_valuation.application.use_cases.receive_stock import (
    ReceiveStockResult,
    ReceiveStockUseCase,
)
from inventory_valuation.application.use_cases.simulate_issue import SimulateIssueUseCase
from inventory_valuation.application.use_cases.transfer_stock import (
    TransferStockResult,
    TransferStockUseCase,
)

__all__ = [
    "ReceiveStockUseCase",
    "ReceiveStockResult",
    "IssueStockUseCase",
    "IssueStockResult",
    "AdjustStockUseCase",
    "AdjustStockResult",
    "TransferStockUseCase",
    "TransferStockResult",
    "SimulateIssueUseCase",
    "GetItemValuationUseCase",
    "GetValuationByMethodUseCase",
]
