"""Tests for UI utility functions (no windows created)."""

import os

import pytest

pytest.importorskip("ttkbootstrap")

from coin_catalog.models.core import BundledImage, ImportedImage  # noqa: E402
from coin_catalog.theming.style import COLOR_ACHIEVED, COLOR_PENDING  # noqa: E402
from coin_catalog.ui.utils import (  # noqa: E402
    achievement_color,
    achievement_marker,
    coin_subtitle,
    coin_title,
    format_price,
    image_label,
    import_photo,
)


def test_format_price() -> None:
    assert format_price(68.5) == "$68.50"
    assert format_price(0) == "$0.00"
    assert format_price(1234.5) == "$1,234.50"


def test_coin_row_text(make_coin) -> None:
    coin = make_coin(country="Japan", year=1964, denomination="10 Yen", market_price=1.5)
    assert coin_title(coin) == "Japan • 1964"
    assert coin_subtitle(coin) == "10 Yen • $1.50"


def test_image_label() -> None:
    assert image_label(BundledImage("japan_10_yen")) == "Asset: japan_10_yen"
    assert image_label(ImportedImage("/photos/abc.jpg")) == "Photo: abc.jpg"
    assert image_label(None) == "No image"


def test_achievement_marker_and_color() -> None:
    assert achievement_marker(True) != achievement_marker(False)
    assert achievement_color(True) == COLOR_ACHIEVED
    assert achievement_color(False) == COLOR_PENDING


def test_import_photo_copies_under_new_name(tmp_path) -> None:
    source = tmp_path / "Picked Photo.PNG"
    source.write_bytes(b"fake image bytes")
    images_dir = tmp_path / "images"
    image = import_photo(str(source), str(images_dir))
    assert isinstance(image, ImportedImage)
    assert os.path.dirname(image.path) == str(images_dir)
    assert image.path.endswith(".png")
    assert open(image.path, "rb").read() == b"fake image bytes"
    assert source.exists()
