"""Tests for the static reference catalog."""

from coin_catalog.models.core import BundledImage
from coin_catalog.services.catalog import get_static_catalog


def test_catalog_has_twenty_unique_coins() -> None:
    catalog = get_static_catalog()
    assert len(catalog) == 20
    assert len({c.id for c in catalog}) == 20


def test_catalog_is_deterministic() -> None:
    assert get_static_catalog() == get_static_catalog()


def test_catalog_order_and_assets() -> None:
    catalog = get_static_catalog()
    assert (catalog[0].country, catalog[0].year, catalog[0].market_price) == ("France", 2014, 68.5)
    assert (catalog[1].country, catalog[1].market_price) == ("USA", 35.0)
    assert all(isinstance(c.image, BundledImage) for c in catalog)
    assert all(c.market_price >= 0 and c.year > 0 for c in catalog)
