"""Validation and construction for coins entered through the add-coin form."""

from __future__ import annotations

import math
import re
from typing import Optional

from coin_catalog.models.core import Coin, CoinInput


# ASCII digits only; no whitespace, digit grouping or non-ASCII numerals
_YEAR_RE = re.compile(r"[+-]?[0-9]+")
_PRICE_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_year(text: str) -> Optional[int]:
    if not isinstance(text, str) or not _YEAR_RE.fullmatch(text):
        return None
    return int(text)


def _parse_price(text: str) -> Optional[float]:
    if not isinstance(text, str) or not _PRICE_RE.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def is_valid_input(fields: CoinInput) -> bool:
    """
    Return True when the form can be saved.

    Country, denomination and material must be non-empty; year must be a
    positive integer and market price a finite number >= 0, both written
    in plain ASCII digits without spaces or digit grouping. Description,
    purchase place and condition may be left empty.
    """
    if not fields.get("country") or not fields.get("denomination") or not fields.get("material"):
        return False
    year = _parse_year(fields.get("year", ""))
    if year is None or year <= 0:
        return False
    price = _parse_price(fields.get("market_price", ""))
    return price is not None and price >= 0


def build_coin(fields: CoinInput) -> Coin:
    """Create a new Coin (fresh id) from input already accepted by is_valid_input."""
    return Coin(
        country=fields["country"],
        denomination=fields["denomination"],
        year=int(fields["year"]),
        material=fields["material"],
        market_price=float(fields["market_price"]),
        description=fields.get("description", ""),
        purchase_place=fields.get("purchase_place", ""),
        condition=fields.get("condition", ""),
        image=fields.get("image"),
    )
