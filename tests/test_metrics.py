"""Tests for collection statistics."""

import pytest

from coin_catalog.services.metrics import (
    compute_collection_stats,
    total_market_price,
    unique_countries,
)


def test_empty_collection_totals_zero() -> None:
    assert total_market_price([]) == 0
    assert unique_countries([]) == 0
    assert compute_collection_stats([], []) == {
        "collected_count": 0,
        "wishlist_count": 0,
        "total_market_price": 0.0,
        "unique_countries": 0,
    }


def test_total_is_sum_of_prices(make_coin) -> None:
    coins = [make_coin(market_price=p) for p in (68.5, 35.0, 0.0, 1.25)]
    assert total_market_price(coins) == pytest.approx(104.75)


def test_unique_countries_counts_distinct_names(make_coin) -> None:
    coins = [make_coin(country=c) for c in ("France", "France", "USA", "usa", "")]
    assert unique_countries(coins) == 4


def test_stats_use_collection_for_money_and_countries(make_coin) -> None:
    """Wishlist coins count only toward wishlist_count."""
    collection = [make_coin(country="Japan", market_price=1.5)]
    wishlist = [make_coin(country="Norway", market_price=30.0), make_coin(country="Poland")]
    stats = compute_collection_stats(collection, wishlist)
    assert stats["collected_count"] == 1
    assert stats["wishlist_count"] == 2
    assert stats["total_market_price"] == pytest.approx(1.5)
    assert stats["unique_countries"] == 1
