from __future__ import annotations

from jobdash.storage import KeyValueStore


def test_missing_key_loads_none(store):
    assert store.load("nothing") is None


def test_save_overwrites_whole_value(store):
    store.save("k", {"a": 1, "b": 2})
    store.save("k", {"c": 3})
    assert store.load("k") == {"c": 3}


def test_malformed_document_loads_none(store):
    store.save("k", [1, 2])
    (store.directory / "k.json").write_text("{not json", encoding="utf-8")
    assert store.load("k") is None


def test_remove_is_idempotent(store):
    store.save("k", 1)
    store.remove("k")
    store.remove("k")
    assert store.load("k") is None


def test_no_temp_files_left_behind(tmp_path):
    s = KeyValueStore(tmp_path)
    s.save("k", {"x": "y"})
    assert sorted(p.name for p in tmp_path.iterdir()) == ["k.json"]
