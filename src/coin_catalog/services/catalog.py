"""Static reference catalog of well-known coins (no I/O)."""

from __future__ import annotations

import uuid
from typing import List, Tuple

from coin_catalog.models.core import BundledImage, Coin

# Namespace for catalog ids so the same entry gets the same id on every call
CATALOG_NAMESPACE = uuid.UUID("6f1c0b7e-3f52-4d0a-9a1e-2c4b8d7e5a10")

# country, denomination, year, material, price, image, description, purchase place, condition
_CATALOG_ROWS: List[Tuple[str, str, int, str, float, str, str, str, str]] = [
    (
        "France", "10 Euro", 2014, "Silver 333", 68.5, "france_2014_gallic_rooster",
        "The Gallic Rooster is a symbol of France, featured on the 2014 coin issued by the Paris Mint. "
        "The coin has a denomination of 10 euros, is made of 333 fine silver, weighs 17 grams, "
        "and has a diameter of 31 millimeters",
        "Paris Mint", "UNC",
    ),
    ("USA", "1 Dollar", 1921, "Silver", 35.0, "usa_1_dollar", "Morgan Dollar", "eBay", "Good"),
    ("Russia", "5 Kopeks", 1899, "Copper", 15.0, "russia_5_kopeks", "Nicholas II", "Antique Store", "Very Good"),
    ("Canada", "2 Dollars", 1996, "Nickel", 7.5, "canada_2_dollars", "Toonie", "Coin Show", "Excellent"),
    ("UK", "1 Pound", 1983, "Nickel-Brass", 12.0, "uk_1_pound", "Queen Elizabeth", "Collector", "Fine"),
    ("Germany", "50 Pfennig", 1950, "Cupro-Nickel", 5.0, "germany_50_pfennig", "Post-war", "Market", "Good"),
    ("France", "5 Francs", 1925, "Silver", 20.0, "france_5_francs", "Rooster Design", "Online", "VG"),
    ("Italy", "10 Lire", 1954, "Aluminum", 3.0, "italy_10_lire", "Post-war", "Show", "Good"),
    ("Japan", "10 Yen", 1964, "Bronze", 1.5, "japan_10_yen", "Tokyo Olympics", "Shop", "Excellent"),
    ("Brazil", "1000 Reis", 1900, "Copper", 25.0, "brazil_1000_reis", "Old Coin", "Auction", "Fine"),
    ("Australia", "50 Cents", 1966, "Cupro-Nickel", 10.0, "australia_50_cents", "Emu Design", "Collector", "Good"),
    ("Mexico", "5 Pesos", 1970, "Silver", 18.0, "mexico_5_pesos", "Commemorative", "eBay", "VG"),
    ("India", "10 Rupees", 1991, "Nickel-Brass", 7.0, "india_10_rupees", "Economic Reform Coin", "Market", "Good"),
    ("China", "1 Yuan", 1987, "Copper", 2.0, "china_1_yuan", "Dragon Design", "Shop", "Excellent"),
    ("South Africa", "1 Rand", 1961, "Nickel", 6.0, "southafrica_1_rand", "Springbok", "Collector", "Good"),
    ("Sweden", "1 Krona", 1965, "Cupro-Nickel", 4.5, "sweden_1_krona", "King Gustaf", "Auction", "Fine"),
    ("Norway", "5 Kroner", 1948, "Silver", 30.0, "norway_5_kroner", "Post-war Design", "Market", "VG"),
    ("Netherlands", "1 Gulden", 1975, "Nickel", 7.0, "netherlands_1_gulden", "Wilhelmina", "Shop", "Good"),
    ("Poland", "10 Zloty", 1939, "Silver", 22.0, "poland_10_zloty", "Pre-war Coin", "Collector", "Fine"),
    ("Czech Republic", "5 Korun", 2000, "NiBrAl", 3.5, "czech_5_korun", "Millennium Coin", "Online", "Excellent"),
]


def catalog_coin_id(country: str, denomination: str, year: int) -> str:
    """Return the stable id of a catalog entry."""
    return str(uuid.uuid5(CATALOG_NAMESPACE, f"{country}|{denomination}|{year}"))


def get_static_catalog() -> List[Coin]:
    """Return the fixed reference list of known coins, in display order.

    Every call builds equal Coin values (ids are derived, not random), so
    membership checks against catalog coins survive a restart.
    """
    return [
        Coin(
            id=catalog_coin_id(country, denomination, year),
            country=country,
            denomination=denomination,
            year=year,
            material=material,
            market_price=price,
            image=BundledImage(image_name),
            description=description,
            purchase_place=purchase_place,
            condition=condition,
        )
        for (
            country, denomination, year, material, price,
            image_name, description, purchase_place, condition,
        ) in _CATALOG_ROWS
    ]
