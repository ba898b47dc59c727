"""Global configuration constants for Coin Catalog.

These values are intentionally free of any UI / Tkinter concerns so they
can be reused by services, scripts, and the desktop application.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base directory for data files (defaults to project root)
BASE_DIR = Path(os.getenv("COIN_CATALOG_DATA_DIR") or Path(__file__).resolve().parents[3])

# --- File paths ---
STORE_FILE = str(BASE_DIR / "coin_store.json")
IMAGES_DIR = str(BASE_DIR / "coin_images")

# Keys under which the owned collection and the wishlist are persisted
COLLECTION_KEY = "coinCollection"
WISHLIST_KEY = "coinWishlist"

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "")
LOG_TO_STDOUT = os.getenv("LOG_TO_STDOUT", "true").lower() == "true"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 3

# Achievement thresholds
FIRST_COINS_THRESHOLD = 5
COINS_COLLECTED_THRESHOLD = 10
WISHLIST_THRESHOLD = 20
COUNTRIES_THRESHOLD = 3
MARKET_VALUE_THRESHOLD = 1000.0

# Image file types offered by the photo picker
IMAGE_FILETYPES = [
    ("Images", "*.jpg *.jpeg *.png *.gif"),
    ("All files", "*.*"),
]
