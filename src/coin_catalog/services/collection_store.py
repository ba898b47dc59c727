"""In-memory collection state: catalog, owned collection, and wishlist."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from coin_catalog.config.logger import get_logger
from coin_catalog.models.core import Achievement, Coin, CoinInput, CollectionStats
from coin_catalog.services import metrics
from coin_catalog.services.achievements import evaluate_achievements
from coin_catalog.services.catalog import get_static_catalog
from coin_catalog.services.coin_input import build_coin, is_valid_input
from coin_catalog.services.storage import CoinStorage

logger = get_logger(__name__)

Observer = Callable[["CollectionStore"], None]


class CollectionStore:
    """
    Authoritative state for the catalog, collection and wishlist.

    Adding is skipped when an equal coin (every field) is already in the
    list; removing drops every entry with the same id. Each mutation is
    applied in memory, then saved, then observers are notified. A failed
    save is logged and recorded in last_save_ok but never undone.

    The host application builds one store and hands it to its views.
    """

    def __init__(
        self,
        storage: Optional[CoinStorage] = None,
        catalog_provider: Callable[[], List[Coin]] = get_static_catalog,
    ) -> None:
        self.storage = storage if storage is not None else CoinStorage()
        self._catalog_provider = catalog_provider
        self._catalog: List[Coin] = []
        self._collection: List[Coin] = []
        self._wishlist: List[Coin] = []
        self._observers: List[Observer] = []
        self.last_save_ok = True
        self.initialize()

    def initialize(self) -> None:
        """Load persisted lists and seed the catalog if it is still empty."""
        collection, wishlist = self.storage.load()
        # Equal duplicates can only come from hand-edited data; keep the first
        self._collection = list(dict.fromkeys(collection))
        self._wishlist = list(dict.fromkeys(wishlist))
        if not self._catalog:
            self._catalog = list(self._catalog_provider())
        logger.info(
            "Loaded %d collected and %d wishlist coins (%d in catalog)",
            len(self._collection), len(self._wishlist), len(self._catalog),
        )

    # --- Published state ---

    @property
    def catalog(self) -> Tuple[Coin, ...]:
        return tuple(self._catalog)

    @property
    def collection(self) -> Tuple[Coin, ...]:
        return tuple(self._collection)

    @property
    def wishlist(self) -> Tuple[Coin, ...]:
        return tuple(self._wishlist)

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Call callback(store) after every change. Returns an unsubscribe function."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _commit(self) -> None:
        self.last_save_ok = self.storage.save(self._collection, self._wishlist)
        if not self.last_save_ok:
            logger.warning("Changes kept in memory but not saved")
        for callback in list(self._observers):
            callback(self)

    # --- Mutations ---

    def add_to_collection(self, coin: Coin) -> bool:
        """Append coin unless an equal coin is already collected. Returns True if added."""
        if coin in self._collection:
            return False
        self._collection.append(coin)
        logger.debug("Added %s to collection", coin.id)
        self._commit()
        return True

    def remove_from_collection(self, coin: Coin) -> bool:
        """Remove every collected entry with coin's id. Returns True if any was removed."""
        before = len(self._collection)
        self._collection = [c for c in self._collection if c.id != coin.id]
        removed = len(self._collection) != before
        if removed:
            logger.debug("Removed %s from collection", coin.id)
        self._commit()
        return removed

    def add_to_wishlist(self, coin: Coin) -> bool:
        """Append coin unless an equal coin is already wished for. Returns True if added."""
        if coin in self._wishlist:
            return False
        self._wishlist.append(coin)
        logger.debug("Added %s to wishlist", coin.id)
        self._commit()
        return True

    def remove_from_wishlist(self, coin: Coin) -> bool:
        """Remove every wishlist entry with coin's id. Returns True if any was removed."""
        before = len(self._wishlist)
        self._wishlist = [c for c in self._wishlist if c.id != coin.id]
        removed = len(self._wishlist) != before
        if removed:
            logger.debug("Removed %s from wishlist", coin.id)
        self._commit()
        return removed

    def is_in_collection(self, coin: Coin) -> bool:
        return coin in self._collection

    def is_in_wishlist(self, coin: Coin) -> bool:
        return coin in self._wishlist

    def toggle_collection(self, coin: Coin) -> bool:
        """Remove coin if collected, otherwise add it. Returns the new membership."""
        if self.is_in_collection(coin):
            self.remove_from_collection(coin)
            return False
        return self.add_to_collection(coin)

    def toggle_wishlist(self, coin: Coin) -> bool:
        """Remove coin if wished for, otherwise add it. Returns the new membership."""
        if self.is_in_wishlist(coin):
            self.remove_from_wishlist(coin)
            return False
        return self.add_to_wishlist(coin)

    def add_new_coin(self, fields: CoinInput) -> Optional[Coin]:
        """Create a coin from form input and collect it. Returns None for invalid input."""
        if not is_valid_input(fields):
            return None
        coin = build_coin(fields)
        self.add_to_collection(coin)
        return coin

    # --- Derived values (recomputed on every call) ---

    def total_market_price(self) -> float:
        return metrics.total_market_price(self._collection)

    def unique_countries(self) -> int:
        return metrics.unique_countries(self._collection)

    def stats(self) -> CollectionStats:
        return metrics.compute_collection_stats(self._collection, self._wishlist)

    def achievements(self) -> List[Achievement]:
        return evaluate_achievements(self._collection, self._wishlist)
