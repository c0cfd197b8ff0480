"""
Tests for the pre-DB JSON config helpers.
"""

import json

from utils.app_config import get_db_folder, get_db_path_override, load_config, set_db_folder


def test_missing_config_is_empty(tmp_path):
    assert load_config(tmp_path / "config.json") == {}


def test_corrupt_config_is_empty(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text("{{{", encoding="utf-8")
    assert load_config(cfg) == {}


def test_non_dict_config_is_empty(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_config(cfg) == {}


def test_set_and_clear_db_folder(tmp_path):
    cfg = tmp_path / "nested" / "config.json"
    set_db_folder("/data/counter", cfg)
    assert get_db_folder(cfg) == "/data/counter"
    assert not cfg.with_suffix(".tmp").exists()
    set_db_folder(None, cfg)
    assert get_db_folder(cfg) is None


def test_db_path_override(monkeypatch):
    monkeypatch.setenv("FRONT_COUNTER_DB", "/tmp/fc.db")
    assert get_db_path_override() == "/tmp/fc.db"
    monkeypatch.delenv("FRONT_COUNTER_DB")
    assert get_db_path_override() is None
