"""Shared UI utilities: row text, price formatting, achievement markers, photo import."""

from __future__ import annotations

import os
import shutil
import uuid

from coin_catalog.models.core import BundledImage, Coin, ImageRef, ImportedImage
from coin_catalog.theming.style import COLOR_ACHIEVED, COLOR_PENDING


def format_price(value: float) -> str:
    """Format a market price as dollars with two decimals, e.g. $68.50."""
    return f"${value:,.2f}"


def coin_title(coin: Coin) -> str:
    """Headline for a coin row: country and year."""
    return f"{coin.country} • {coin.year}"


def coin_subtitle(coin: Coin) -> str:
    """Second line for a coin row: denomination and price."""
    return f"{coin.denomination} • {format_price(coin.market_price)}"


def image_label(image: ImageRef) -> str:
    """Describe where a coin's picture comes from."""
    if isinstance(image, BundledImage):
        return f"Asset: {image.name}"
    if isinstance(image, ImportedImage):
        return f"Photo: {os.path.basename(image.path)}"
    return "No image"


def achievement_marker(achieved: bool) -> str:
    return "✔" if achieved else "○"


def achievement_color(achieved: bool) -> str:
    """Foreground color for an achievement row."""
    return COLOR_ACHIEVED if achieved else COLOR_PENDING


def import_photo(source_path: str, images_dir: str) -> ImportedImage:
    """
    Copy a picked photo into images_dir under a fresh UUID name.

    Only the resulting path is recorded on the coin; the bytes are never read.
    Raises OSError if the copy fails.
    """
    os.makedirs(images_dir, exist_ok=True)
    ext = os.path.splitext(source_path)[1].lower() or ".jpg"
    target = os.path.join(images_dir, f"{uuid.uuid4()}{ext}")
    shutil.copy(source_path, target)
    return ImportedImage(target)
