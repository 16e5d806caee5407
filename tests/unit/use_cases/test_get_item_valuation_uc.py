"""Tests for GetItemValuationUseCase."""

from datetime import date

import pytest
import pytest_asyncio

from inventory_valuation.application.use_cases.get_item_valuation import (
    GetItemValuationUseCase,
)
from inventory_valuation.core.entities.inventory import ItemValuationState
from inventory_valuation.core.exceptions import InventoryItemNotFoundError


@pytest_asyncio.fixture
async def stocked_ledger(ledger):
    receipts = [(100, 45, "LOT-1", date(2024, 1, 1)), (50, 55, "LOT-2", date(2024, 2, 1))]
    for qty, cost, lot, day in receipts:
        await ledger.receive(
            "SKU-1",
            qty,
            cost,
            warehouse_id="WH-A",
            valuation_method="FIFO",
            batch_number=lot,
            posting_date=day,
        )
    await ledger.issue("SKU-1", 30, warehouse_id="WH-A")
    return ledger


class TestGetItemValuation:
    async def test_state_and_entries(self, stocked_ledger):
        use_case = GetItemValuationUseCase(ledger=stocked_ledger)
        response = await use_case.execute("SKU-1", "WH-A")

        assert response.state.valuation_method == "FIFO"
        assert response.state.quantity == 120
        assert response.state.value == pytest.approx(70 * 45 + 50 * 55)
        assert [e.movement_type for e in response.recent_entries] == [
            "SALE_OUT",
            "PURCHASE_IN",
            "PURCHASE_IN",
        ]

    async def test_entry_limit(self, stocked_ledger):
        use_case = GetItemValuationUseCase(ledger=stocked_ledger)
        response = await use_case.execute("SKU-1", "WH-A", entry_limit=1)
        assert len(response.recent_entries) == 1
        assert response.recent_entries[0].cost_of_goods_sold == pytest.approx(30 * 45)

    async def test_default_method_reported(self, ledger):
        await ledger.store.save_state(ItemValuationState(item_id="SKU-9"))
        response = await GetItemValuationUseCase(ledger=ledger).execute("SKU-9")
        assert response.state.valuation_method == "Weighted Average"
        assert response.recent_entries == []

    async def test_unknown_item(self, ledger):
        use_case = GetItemValuationUseCase(ledger=ledger)
        with pytest.raises(InventoryItemNotFoundError):
            await use_case.execute("MISSING")

    async def test_other_warehouse_not_found(self, stocked_ledger):
        use_case = GetItemValuationUseCase(ledger=stocked_ledger)
        with pytest.raises(InventoryItemNotFoundError):
            await use_case.execute("SKU-1", "WH-B")


class TestGetBatches:
    async def test_oldest_first(self, stocked_ledger):
        batches = await GetItemValuationUseCase(ledger=stocked_ledger).get_batches(
            "SKU-1", "WH-A"
        )
        assert [(b.quantity, b.rate) for b in batches] == [(70, 45), (50, 55)]
        assert [b.batch_number for b in batches] == ["LOT-1", "LOT-2"]
        assert batches[0].received_date == date(2024, 1, 1)
        assert batches[0].value == pytest.approx(70 * 45)

    async def test_average_item_has_one_batch(self, ledger):
        await ledger.receive("SKU-2", 10, 2, valuation_method="Moving Average")
        await ledger.receive("SKU-2", 10, 4)
        batches = await GetItemValuationUseCase(ledger=ledger).get_batches("SKU-2")
        assert len(batches) == 1
        assert batches[0].rate == pytest.approx(3)

    async def test_unknown_item(self, ledger):
        with pytest.raises(InventoryItemNotFoundError):
            await GetItemValuationUseCase(ledger=ledger).get_batches("MISSING")

    async def test_uses_shared_ledger_by_default(self):
        from inventory_valuation.application.services import get_valuation_ledger

        ledger = await get_valuation_ledger()
        await ledger.receive("SKU-1", 5, 2)
        batches = await GetItemValuationUseCase().get_batches("SKU-1")
        assert batches[0].quantity == 5
