"""
Tests for the DatabaseManager collection store.
"""

import os

from database.db_manager import DatabaseManager


def _put_raw(db, key, value):
    conn = db.get_connection()
    conn.execute("INSERT OR REPLACE INTO collections(key, value) VALUES (?, ?)", (key, value))
    conn.commit()


def test_roundtrip_preserves_order_and_fields(db):
    records = [
        {"id": "b", "name": "Second", "color": "#2196F3", "order": 1},
        {"id": "a", "name": "First", "color": "#4CAF50", "order": 0},
    ]
    db.write_collection("fc_categories", records)
    assert db.read_collection("fc_categories") == records


def test_roundtrip_non_ascii(db):
    records = [{"id": "c1", "name": "問い合わせ"}]
    db.write_collection("fc_categories", records)
    assert db.read_collection("fc_categories") == records


def test_missing_key_is_empty(db):
    assert db.read_collection("fc_entries") == []


def test_corrupt_value_is_empty(db):
    _put_raw(db, "fc_entries", "not json {{{")
    assert db.read_collection("fc_entries") == []


def test_non_array_value_is_empty(db):
    _put_raw(db, "fc_entries", '{"id": "e1"}')
    assert db.read_collection("fc_entries") == []


def test_null_value_is_empty(db):
    _put_raw(db, "fc_entries", "null")
    assert db.read_collection("fc_entries") == []


def test_collections_are_independent(db):
    db.write_collection("fc_categories", [{"id": "c1"}])
    db.write_collection("fc_entries", [{"id": "e1"}])
    db.remove_collection("fc_categories")
    assert db.read_collection("fc_categories") == []
    assert db.read_collection("fc_entries") == [{"id": "e1"}]


def test_overwrite_replaces_collection(db):
    db.write_collection("fc_entries", [{"id": "e1"}, {"id": "e2"}])
    db.write_collection("fc_entries", [{"id": "e2"}])
    assert db.read_collection("fc_entries") == [{"id": "e2"}]


def test_default_settings_seeded(db):
    assert db.get_setting("appearance_mode") == "system"
    assert db.get_setting("missing", "fallback") == "fallback"


def test_set_setting(db):
    db.set_setting("appearance_mode", "dark")
    assert db.get_setting("appearance_mode") == "dark"


def test_open_default_in_folder_persists(tmp_path):
    folder = tmp_path / "data"
    db = DatabaseManager.open_default(db_folder=str(folder))
    db.write_collection("fc_entries", [{"id": "e1", "categoryId": "c1", "timestamp": 5}])
    db.close()
    assert os.path.exists(folder / "front_counter.db")

    reopened = DatabaseManager.open_default(db_folder=str(folder))
    assert reopened.read_collection("fc_entries") == [
        {"id": "e1", "categoryId": "c1", "timestamp": 5}
    ]
    reopened.close()


def test_open_default_explicit_path_wins(tmp_path):
    path = tmp_path / "custom.db"
    db = DatabaseManager.open_default(db_folder=str(tmp_path / "ignored"), db_path=str(path))
    db.close()
    assert path.exists()
    assert not (tmp_path / "ignored").exists()
