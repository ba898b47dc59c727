"""Milestones derived from the current collection and wishlist."""

from __future__ import annotations

from typing import List, Sequence

from coin_catalog.config.constants import (
    COINS_COLLECTED_THRESHOLD,
    COUNTRIES_THRESHOLD,
    FIRST_COINS_THRESHOLD,
    MARKET_VALUE_THRESHOLD,
    WISHLIST_THRESHOLD,
)
from coin_catalog.models.core import Achievement, Coin
from coin_catalog.services.metrics import total_market_price, unique_countries


def evaluate_achievements(collection: Sequence[Coin], wishlist: Sequence[Coin]) -> List[Achievement]:
    """Return every achievement, in display order, with its current status."""
    return [
        Achievement("First 5 coins collected", len(collection) >= FIRST_COINS_THRESHOLD),
        Achievement("10 coins collected", len(collection) >= COINS_COLLECTED_THRESHOLD),
        Achievement("20 coins in wishlist", len(wishlist) >= WISHLIST_THRESHOLD),
        Achievement("Collected coins from 3+ countries", unique_countries(collection) >= COUNTRIES_THRESHOLD),
        Achievement("Total market value over $1000", total_market_price(collection) >= MARKET_VALUE_THRESHOLD),
    ]
