"""Shared fixtures: in-memory store, slot store and page layout."""

import pytest

from adslots.adapters.memory_store import InMemoryKeyValueStore
from adslots.domain.slot_store import SlotStore
from adslots.models.layout import SlotLayout
from adslots.observability import reset_metrics


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def slot_store(kv) -> SlotStore:
    return SlotStore(kv)


@pytest.fixture
def layout() -> SlotLayout:
    return SlotLayout(namespace="TESTPAGE")


@pytest.fixture(autouse=True)
def _clean_metrics():
    reset_metrics()
    yield
    reset_metrics()
