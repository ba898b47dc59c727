"""Collection statistics (pure functions)."""

from __future__ import annotations

from typing import Sequence

from coin_catalog.models.core import Coin, CollectionStats


def total_market_price(coins: Sequence[Coin]) -> float:
    """Sum of market prices. 0.0 for an empty sequence."""
    return sum((c.market_price for c in coins), 0.0)


def unique_countries(coins: Sequence[Coin]) -> int:
    """Number of distinct country values."""
    return len({c.country for c in coins})


def compute_collection_stats(collection: Sequence[Coin], wishlist: Sequence[Coin]) -> CollectionStats:
    """
    Compute the figures shown on the statistics screen.

    Always recomputed from the given lists; nothing is cached.
    """
    return {
        "collected_count": len(collection),
        "wishlist_count": len(wishlist),
        "total_market_price": total_market_price(collection),
        "unique_countries": unique_countries(collection),
    }
