"""Tests for the in-memory valuation store."""

import pytest

from inventory_valuation.core.entities.inventory import (
    ItemValuationState,
    MovementType,
    ValuationEntry,
)
from inventory_valuation.core.exceptions import ConcurrencyConflictError
from inventory_valuation.infrastructure.storage.memory import (
    InMemoryValuationStore,
    get_valuation_store,
    reset_valuation_store,
)


def _entry(item_id: str = "SKU-1", warehouse_id: str | None = None, qty: float = 1.0):
    return ValuationEntry(
        item_id=item_id,
        warehouse_id=warehouse_id,
        movement_type=MovementType.PURCHASE_IN,
        valuation_method="FIFO",
        quantity=qty,
        qty_after_transaction=qty,
        valuation_rate=1.0,
        stock_value=qty,
        stock_value_difference=qty,
    )


class TestStateVersioning:
    async def test_first_save_gets_version_one(self, store):
        saved = await store.save_state(ItemValuationState(item_id="SKU-1", quantity=5))
        assert saved.version == 1
        assert (await store.get_state("SKU-1")).quantity == 5

    async def test_save_from_current_version(self, store):
        first = await store.save_state(ItemValuationState(item_id="SKU-1"))
        second = await store.save_state(first.model_copy(update={"quantity": 3}))
        assert second.version == 2

    async def test_stale_write_conflicts(self, store):
        first = await store.save_state(ItemValuationState(item_id="SKU-1"))
        await store.save_state(first.model_copy(update={"quantity": 3}))

        with pytest.raises(ConcurrencyConflictError) as exc_info:
            await store.save_state(first.model_copy(update={"quantity": 9}))
        assert exc_info.value.details["expected_version"] == 1
        assert exc_info.value.details["actual_version"] == 2
        assert (await store.get_state("SKU-1")).quantity == 3

    async def test_warehouses_are_separate(self, store):
        await store.save_state(ItemValuationState(item_id="SKU-1", warehouse_id="A", quantity=1))
        await store.save_state(ItemValuationState(item_id="SKU-1", warehouse_id="B", quantity=2))
        assert (await store.get_state("SKU-1", "A")).quantity == 1
        assert (await store.get_state("SKU-1", "B")).quantity == 2
        assert await store.get_state("SKU-1") is None

    async def test_list_states_sorted_and_paged(self, store):
        for item in ["C", "A", "B"]:
            await store.save_state(ItemValuationState(item_id=item))
        states = await store.list_states()
        assert [s.item_id for s in states] == ["A", "B", "C"]
        page = await store.list_states(limit=1, offset=1)
        assert [s.item_id for s in page] == ["B"]

    async def test_delete_state(self, store):
        await store.save_state(ItemValuationState(item_id="SKU-1", warehouse_id="A"))
        await store.save_state(ItemValuationState(item_id="SKU-1", warehouse_id="B"))

        assert await store.delete_state("SKU-1", "A") is True
        assert await store.delete_state("SKU-1", "A") is False
        assert await store.get_state("SKU-1", "A") is None
        assert await store.get_state("SKU-1", "B") is not None

    async def test_save_after_delete_starts_over(self, store):
        first = await store.save_state(ItemValuationState(item_id="SKU-1"))
        await store.delete_state("SKU-1")
        with pytest.raises(ConcurrencyConflictError):
            await store.save_state(first)
        assert (await store.save_state(ItemValuationState(item_id="SKU-1"))).version == 1


class TestEntries:
    async def test_ids_assigned(self, store):
        a = await store.add_entry(_entry())
        b = await store.add_entry(_entry())
        assert (a.id, b.id) == (1, 2)

    async def test_newest_first_and_filtered(self, store):
        await store.add_entry(_entry(qty=1))
        await store.add_entry(_entry(item_id="SKU-2", qty=2))
        await store.add_entry(_entry(qty=3))
        await store.add_entry(_entry(warehouse_id="WH", qty=4))

        entries = await store.get_entries("SKU-1")
        assert [e.quantity for e in entries] == [3, 1]
        assert [e.quantity for e in await store.get_entries("SKU-1", limit=1, offset=1)] == [1]

    async def test_delete_entry(self, store):
        first = await store.add_entry(_entry(qty=1))
        await store.add_entry(_entry(qty=2))

        assert await store.delete_entry(first.id) is True
        assert await store.delete_entry(first.id) is False
        assert [e.quantity for e in await store.get_entries("SKU-1")] == [2]

    async def test_ids_not_reused_after_delete(self, store):
        first = await store.add_entry(_entry())
        await store.delete_entry(first.id)
        assert (await store.add_entry(_entry())).id == 2


class TestSingleton:
    async def test_get_valuation_store_is_shared(self):
        first = await get_valuation_store()
        assert await get_valuation_store() is first
        assert isinstance(first, InMemoryValuationStore)
        reset_valuation_store()
        assert await get_valuation_store() is not first
