"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from inventory_valuation.application.ledger import ValuationLedger
from inventory_valuation.application.locks import ItemLockRegistry
from inventory_valuation.application.services import reset_services
from inventory_valuation.config import Settings, ValuationSettings, reset_settings
from inventory_valuation.core.entities.valuation import StockBatch
from inventory_valuation.infrastructure.storage.memory import (
    InMemoryValuationStore,
    reset_valuation_store,
)


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Fresh settings and service singletons for every test."""
    reset_settings()
    reset_services()
    reset_valuation_store()
    yield
    reset_settings()
    reset_services()
    reset_valuation_store()


@pytest.fixture
def settings() -> Settings:
    """Settings with invariant checks on and default values elsewhere."""
    return Settings(valuation=ValuationSettings(check_invariants=True))


@pytest.fixture
def store() -> InMemoryValuationStore:
    return InMemoryValuationStore()


@pytest.fixture
def ledger(store: InMemoryValuationStore, settings: Settings) -> ValuationLedger:
    return ValuationLedger(store=store, locks=ItemLockRegistry(), settings=settings)


@pytest.fixture
def two_layer_queue() -> tuple[StockBatch, ...]:
    """Queue used throughout the docs: 100 @ 45 then 50 @ 55."""
    return (
        StockBatch(quantity=100, rate=45),
        StockBatch(quantity=50, rate=55),
    )
