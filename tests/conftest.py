"""Pytest configuration: ensure src is on path when running tests from repo root."""

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
_src = _root / "src"
if _src.is_dir() and str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from coin_catalog.models.core import Coin  # noqa: E402
from coin_catalog.services.collection_store import CollectionStore  # noqa: E402
from coin_catalog.services.storage import CoinStorage, MemoryStore  # noqa: E402


@pytest.fixture
def make_coin():
    """Factory for coins with sensible defaults; override any field by keyword."""
    def _make(**overrides) -> Coin:
        fields = {
            "country": "USA",
            "denomination": "1 Dollar",
            "year": 1921,
            "material": "Silver",
            "market_price": 35.0,
            "description": "Morgan Dollar",
            "purchase_place": "eBay",
            "condition": "Good",
        }
        fields.update(overrides)
        return Coin(**fields)
    return _make


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def store(memory_store: MemoryStore) -> CollectionStore:
    """Fresh collection store with nothing persisted."""
    return CollectionStore(CoinStorage(memory_store))
