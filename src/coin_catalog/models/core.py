"""Typed structures for coins, stored records, and derived collection data."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Optional, TypedDict, Union


@dataclass(frozen=True)
class BundledImage:
    """Image shipped with the application, referenced by asset name."""

    name: str


@dataclass(frozen=True)
class ImportedImage:
    """User-imported photo, referenced by its path on disk."""

    path: str


ImageRef = Optional[Union[BundledImage, ImportedImage]]


def new_coin_id() -> str:
    """Return a fresh string-form UUID for a coin."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Coin:
    """
    One coin record. Equality compares every field, including id and image.

    The entity does not range-check year or price; the add-coin input
    boundary (services.coin_input) does that. market_price must be finite.
    """

    country: str
    denomination: str
    year: int
    material: str
    market_price: float
    description: str
    purchase_place: str
    condition: str
    image: ImageRef = None
    # Legacy raw image bytes, kept only when decoded from old stored data
    image_data: Optional[bytes] = None
    id: str = field(default_factory=new_coin_id)

    def __post_init__(self) -> None:
        if not math.isfinite(self.market_price):
            raise ValueError(f"market_price must be a finite number, got {self.market_price!r}")


class CoinRecord(TypedDict, total=False):
    """JSON shape of one persisted coin (camelCase keys)."""

    id: str
    country: str
    denomination: str
    year: int
    material: str
    marketPrice: float
    imageData: Optional[str]
    description: str
    purchasePlace: str
    condition: str
    imageName: Optional[str]
    imagePath: Optional[str]


class CoinInput(TypedDict, total=False):
    """Raw text fields from the add-coin form, plus the chosen image."""

    country: str
    denomination: str
    year: str
    material: str
    market_price: str
    description: str
    purchase_place: str
    condition: str
    image: ImageRef


class CollectionStats(TypedDict):
    """Aggregate statistics as returned by compute_collection_stats."""

    collected_count: int
    wishlist_count: int
    total_market_price: float
    unique_countries: int


@dataclass(frozen=True)
class Achievement:
    """A milestone and whether the current collection state reaches it."""

    title: str
    achieved: bool
