import json

import pytest

from inventory.errors import StorageError
from inventory.models import Product, Settings, Stock, StockStatus
from inventory.storage import JsonStore


def _product(**overrides):
    data = dict(
        id="p1",
        name="Tata Salt",
        size_value=1,
        size_unit="kg",
        buying_price=20,
        selling_price=22,
        aliases=["namak"],
    )
    data.update(overrides)
    return Product(**data)


def _raw_store():
    return {
        "products": [
            {
                "id": "p1",
                "name": "Tata Salt",
                "size_value": 1,
                "size_unit": "kg",
                "buying_price": 20,
                "selling_price": 22,
                "aliases": ["namak"],
                "stock": {"status": "LOW"},
            }
        ]
    }


def test_load_missing_returns_empty(tmp_path):
    store = JsonStore(tmp_path / "missing.json")
    assert store.products() == []
    assert store.settings is None


def test_save_roundtrip(tmp_path):
    path = tmp_path / "store.json"
    store = JsonStore(path)
    store.put(_product(stock=Stock(status=StockStatus.EMPTY)))
    store.put_settings(Settings(default_margin=12.5, language="en"))

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["products"][0]["stock"]["status"] == "EMPTY"
    assert raw["settings"] == {"default_margin": 12.5, "language": "en"}

    loaded = JsonStore(path)
    product = loaded.get("p1")
    assert product.name == "Tata Salt"
    assert product.aliases == ["namak"]
    assert product.stock_status is StockStatus.EMPTY
    assert loaded.settings == Settings(default_margin=12.5, language="en")


def test_remove_persists(tmp_path):
    path = tmp_path / "store.json"
    store = JsonStore(path)
    store.put(_product())
    store.remove("p1")
    assert JsonStore(path).products() == []


def test_load_utf16_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps(_raw_store(), ensure_ascii=False), encoding="utf-16")
    store = JsonStore(path)
    assert store.get("p1").stock_status is StockStatus.LOW


def test_load_utf8_bom(tmp_path):
    path = tmp_path / "store.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps(_raw_store()).encode("utf-8"))
    assert JsonStore(path).get("p1").name == "Tata Salt"


def test_load_with_control_chars(tmp_path):
    path = tmp_path / "store.json"
    path.write_bytes(json.dumps(_raw_store()).encode("utf-8") + b"\x00")
    assert JsonStore(path).get("p1").name == "Tata Salt"


def test_load_empty_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("   ", encoding="utf-8")
    assert JsonStore(path).products() == []


def test_load_skips_malformed_product(tmp_path):
    data = _raw_store()
    data["products"].append({"id": "p2", "name": "No price"})
    path = tmp_path / "store.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    store = JsonStore(path)
    assert [p.id for p in store.products()] == ["p1"]


def test_load_product_without_stock_record(tmp_path):
    data = _raw_store()
    del data["products"][0]["stock"]
    path = tmp_path / "store.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    assert JsonStore(path).get("p1").stock_status is None


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_invalid_document_raises(tmp_path, content):
    path = tmp_path / "store.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonStore(path)


def test_memory_store_never_writes(tmp_path):
    store = JsonStore()
    store.put(_product())
    assert store.path is None
    assert [p.name for p in store.products()] == ["Tata Salt"]


def _failing_save():
    raise StorageError("disk full")


def test_failed_save_restores_previous_state(monkeypatch):
    store = JsonStore()
    original = _product()
    store.put(original)
    store.put_settings(Settings())
    monkeypatch.setattr(store, "save", _failing_save)

    with pytest.raises(StorageError):
        store.put(_product(name="Changed"))
    with pytest.raises(StorageError):
        store.put(_product(id="p2"))
    with pytest.raises(StorageError):
        store.remove("p1")
    with pytest.raises(StorageError):
        store.put_settings(Settings(language="en"))

    assert store.get("p1") is original
    assert store.get("p2") is None
    assert store.settings == Settings()
