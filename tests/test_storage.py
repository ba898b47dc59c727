"""Tests for the coin JSON codec and collection/wishlist persistence."""

import base64
import json
import logging

import pytest

from coin_catalog.config.constants import COLLECTION_KEY, WISHLIST_KEY
from coin_catalog.models.core import BundledImage, ImportedImage
from coin_catalog.services.collection_store import CollectionStore
from coin_catalog.services.storage import (
    CoinStorage,
    JsonFileStore,
    MemoryStore,
    coin_from_record,
    coin_to_record,
    decode_coins,
    encode_coins,
)


class FailingStore(MemoryStore):
    """Store whose writes always fail."""

    def set(self, key: str, value: str) -> None:
        raise OSError("disk full")


def test_record_uses_camel_case_keys(make_coin) -> None:
    """Records carry the persisted field names; absent optionals are omitted."""
    coin = make_coin(image=BundledImage("usa_1_dollar"))
    record = coin_to_record(coin)
    assert record["id"] == coin.id
    assert record["marketPrice"] == 35.0
    assert record["purchasePlace"] == "eBay"
    assert record["imageName"] == "usa_1_dollar"
    assert "imagePath" not in record
    assert "imageData" not in record


def test_imported_image_written_as_path(make_coin) -> None:
    record = coin_to_record(make_coin(image=ImportedImage("/tmp/photo.jpg")))
    assert record["imagePath"] == "/tmp/photo.jpg"
    assert "imageName" not in record


def test_round_trip_preserves_order_and_fields(make_coin) -> None:
    """load(save(C, W)) reproduces both lists exactly."""
    collection = [
        make_coin(country="France", market_price=68.5, image=BundledImage("france_2014_gallic_rooster")),
        make_coin(country="Japan", year=1964, image=ImportedImage("/photos/yen.jpg")),
        make_coin(country="", description="", purchase_place="", condition=""),
    ]
    wishlist = [make_coin(country="Norway"), collection[0]]
    storage = CoinStorage(MemoryStore())
    assert storage.save(collection, wishlist) is True
    loaded_collection, loaded_wishlist = storage.load()
    assert loaded_collection == collection
    assert loaded_wishlist == wishlist


def test_round_trip_through_json_file(tmp_path, make_coin) -> None:
    path = tmp_path / "data" / "coin_store.json"
    coins = [make_coin(), make_coin(country="Italy")]
    assert CoinStorage(JsonFileStore(str(path))).save(coins, []) is True
    assert path.exists()
    collection, wishlist = CoinStorage(JsonFileStore(str(path))).load()
    assert collection == coins
    assert wishlist == []


def test_load_missing_keys_is_empty() -> None:
    assert CoinStorage(MemoryStore()).load() == ([], [])


def test_load_missing_file_is_empty(tmp_path) -> None:
    assert CoinStorage(JsonFileStore(str(tmp_path / "nope.json"))).load() == ([], [])


def test_corrupt_wishlist_does_not_affect_collection(make_coin, caplog) -> None:
    """A bad value under one key only empties that list."""
    coins = [make_coin()]
    store = MemoryStore({COLLECTION_KEY: encode_coins(coins), WISHLIST_KEY: "{not json"})
    with caplog.at_level(logging.WARNING):
        collection, wishlist = CoinStorage(store).load()
    assert collection == coins
    assert wishlist == []
    assert WISHLIST_KEY in caplog.text


def test_schema_mismatch_empties_that_list(make_coin) -> None:
    bad = json.dumps([{"id": "x", "country": "USA"}])
    wrong_type = json.dumps([dict(coin_to_record(make_coin()), year="1921")])
    store = MemoryStore({COLLECTION_KEY: bad, WISHLIST_KEY: wrong_type})
    assert CoinStorage(store).load() == ([], [])


def test_corrupt_store_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "coin_store.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert CoinStorage(JsonFileStore(str(path))).load() == ([], [])


def test_save_failure_is_reported_not_raised(make_coin, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        ok = CoinStorage(FailingStore()).save([make_coin()], [])
    assert ok is False
    assert "disk full" in caplog.text


def test_both_images_prefers_bundled_asset(make_coin) -> None:
    record = dict(coin_to_record(make_coin()), imageName="asset", imagePath="/tmp/x.jpg")
    assert coin_from_record(record).image == BundledImage("asset")


def test_legacy_image_data_is_decoded_and_kept(make_coin) -> None:
    """Old records with base64 imageData still load and save back unchanged."""
    raw = b"\x89PNG\r\n"
    record = dict(coin_to_record(make_coin()), imageData=base64.b64encode(raw).decode("ascii"))
    coin = coin_from_record(record)
    assert coin.image_data == raw
    assert coin_to_record(coin)["imageData"] == record["imageData"]


def test_integer_price_decodes_as_float(make_coin) -> None:
    record = dict(coin_to_record(make_coin()), marketPrice=12)
    coin = coin_from_record(record)
    assert coin.market_price == 12.0
    assert isinstance(coin.market_price, float)


def test_decode_rejects_non_array() -> None:
    with pytest.raises(TypeError):
        decode_coins(json.dumps({"coins": []}))


def test_json_file_store_keeps_other_keys(tmp_path) -> None:
    store = JsonFileStore(str(tmp_path / "kv.json"))
    store.set("a", "1")
    store.set("b", "2")
    assert store.get("a") == "1"
    assert store.get("b") == "2"
    assert store.get("c") is None


def test_out_of_range_price_empties_only_that_list(make_coin) -> None:
    """An integer price too large for a float loads as an empty list."""
    coins = [make_coin()]
    huge = json.dumps([dict(coin_to_record(make_coin()), marketPrice=10**400)])
    store = MemoryStore({COLLECTION_KEY: encode_coins(coins), WISHLIST_KEY: huge})
    assert CoinStorage(store).load() == (coins, [])


def test_deeply_nested_value_empties_only_that_list(make_coin) -> None:
    coins = [make_coin()]
    store = MemoryStore({COLLECTION_KEY: encode_coins(coins), WISHLIST_KEY: "[" * 100000})
    assert CoinStorage(store).load() == (coins, [])


def test_deeply_nested_store_file_reads_as_empty(tmp_path) -> None:
    """The store still opens when the whole file is nested too deeply to parse."""
    path = tmp_path / "coin_store.json"
    path.write_text("[" * 100000, encoding="utf-8")
    store = CollectionStore(CoinStorage(JsonFileStore(str(path))))
    assert store.collection == ()
    assert store.wishlist == ()
    assert len(store.catalog) == 20
