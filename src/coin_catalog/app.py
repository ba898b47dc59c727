"""Application bootstrap and core API entrypoints for Coin Catalog.

Provides a small core API (open_store, list_catalog, summary) for use by
the desktop UI, scripts, or an interactive shell.
"""

from __future__ import annotations

from typing import List, Optional

from .config.constants import STORE_FILE
from .models.core import Coin, CollectionStats
from .services.collection_store import CollectionStore
from .services.storage import CoinStorage, JsonFileStore


def open_store(path: Optional[str] = None) -> CollectionStore:
    """Open the collection store backed by a JSON file.

    Args:
        path: Store file; defaults to STORE_FILE (coin_store.json in the data dir).

    Returns:
        An initialized CollectionStore with the catalog seeded.
    """
    return CollectionStore(CoinStorage(JsonFileStore(path or STORE_FILE)))


def list_catalog(store: CollectionStore) -> List[Coin]:
    """Return the reference catalog as a list, in display order."""
    return list(store.catalog)


def summary(store: CollectionStore) -> CollectionStats:
    """Return collected/wishlist counts, total market price and unique countries."""
    return store.stats()


def main() -> None:
    """Launch the Coin Catalog desktop application."""
    from .ui.main_window import CoinCatalogApp  # Deferred so core API is usable without GUI deps

    app = CoinCatalogApp(open_store())
    app.mainloop()
