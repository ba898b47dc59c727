"""Data persistence: key-value stores, coin JSON codec, and collection/wishlist load/save."""

from __future__ import annotations

import base64
import json
import os
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from coin_catalog.config.constants import COLLECTION_KEY, STORE_FILE, WISHLIST_KEY
from coin_catalog.config.logger import get_logger
from coin_catalog.models.core import BundledImage, Coin, CoinRecord, ImportedImage

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """Durable string-keyed medium holding one serialized value per key."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process key-value store (tests, scripts, throwaway sessions)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileStore:
    """
    Key-value store backed by a single JSON object on disk.

    Each key maps to an already-serialized string, so a corrupt value under
    one key never affects decoding another. A missing or unreadable file
    reads as empty; writes raise OSError for the caller to handle.
    """

    def __init__(self, path: str = STORE_FILE) -> None:
        self.path = path

    def _read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Could not read store file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold a JSON object; ignoring it", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
        os.replace(tmp_path, self.path)


def _field(record: Dict[str, Any], key: str, kind: Any) -> Any:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"Field {key!r} has unexpected type {type(value).__name__}")
    return value


def _optional_str(record: Dict[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Field {key!r} has unexpected type {type(value).__name__}")
    return value


def coin_to_record(coin: Coin) -> CoinRecord:
    """Return the JSON-ready record for a coin. Absent optionals are omitted."""
    record: CoinRecord = {
        "id": coin.id,
        "country": coin.country,
        "denomination": coin.denomination,
        "year": coin.year,
        "material": coin.material,
        "marketPrice": coin.market_price,
        "description": coin.description,
        "purchasePlace": coin.purchase_place,
        "condition": coin.condition,
    }
    if isinstance(coin.image, BundledImage):
        record["imageName"] = coin.image.name
    elif isinstance(coin.image, ImportedImage):
        record["imagePath"] = coin.image.path
    if coin.image_data is not None:
        record["imageData"] = base64.b64encode(coin.image_data).decode("ascii")
    return record


def coin_from_record(record: Dict[str, Any]) -> Coin:
    """
    Build a Coin from a stored record.

    Raises KeyError, TypeError, ValueError or OverflowError when the record
    does not match the expected shape. When both imageName and imagePath are
    present the bundled asset wins.
    """
    if not isinstance(record, dict):
        raise TypeError(f"Coin record must be an object, got {type(record).__name__}")

    image_name = _optional_str(record, "imageName")
    image_path = _optional_str(record, "imagePath")
    image = None
    if image_name is not None:
        image = BundledImage(image_name)
    elif image_path is not None:
        image = ImportedImage(image_path)

    raw_data = _optional_str(record, "imageData")
    image_data = base64.b64decode(raw_data, validate=True) if raw_data is not None else None

    return Coin(
        id=_field(record, "id", str),
        country=_field(record, "country", str),
        denomination=_field(record, "denomination", str),
        year=_field(record, "year", int),
        material=_field(record, "material", str),
        market_price=float(_field(record, "marketPrice", (int, float))),
        description=_field(record, "description", str),
        purchase_place=_field(record, "purchasePlace", str),
        condition=_field(record, "condition", str),
        image=image,
        image_data=image_data,
    )


def encode_coins(coins: Iterable[Coin]) -> str:
    """Serialize coins to a JSON array string (order preserved)."""
    return json.dumps([coin_to_record(c) for c in coins], allow_nan=False)


def decode_coins(raw: str) -> List[Coin]:
    """Parse a JSON array string into coins. Raises on any malformed entry."""
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"Expected a JSON array of coins, got {type(data).__name__}")
    return [coin_from_record(item) for item in data]


class CoinStorage:
    """Saves and loads the collection and wishlist under two fixed keys."""

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        collection_key: str = COLLECTION_KEY,
        wishlist_key: str = WISHLIST_KEY,
    ) -> None:
        self.store: KeyValueStore = store if store is not None else JsonFileStore()
        self.collection_key = collection_key
        self.wishlist_key = wishlist_key

    def save(self, collection: Iterable[Coin], wishlist: Iterable[Coin]) -> bool:
        """
        Persist both lists. Returns False if either key failed to encode or write.

        Failures are logged and never raised; each key is written independently.
        """
        ok = True
        for key, coins in ((self.collection_key, collection), (self.wishlist_key, wishlist)):
            try:
                self.store.set(key, encode_coins(coins))
            except (OSError, TypeError, ValueError) as e:
                logger.warning("Failed to save %s: %s", key, e)
                ok = False
        return ok

    def _load_key(self, key: str) -> List[Coin]:
        raw = self.store.get(key)
        if raw is None:
            return []
        try:
            return decode_coins(raw)
        except (KeyError, TypeError, ValueError, OverflowError, RecursionError) as e:
            logger.warning("Discarding unreadable %s data: %s", key, e)
            return []

    def load(self) -> Tuple[List[Coin], List[Coin]]:
        """Return (collection, wishlist). A missing or corrupt key loads as empty."""
        return self._load_key(self.collection_key), self._load_key(self.wishlist_key)
