"""Tests for the bytes-valued settings store and its disk mirror."""

import json

import pytest

from playground.systems.settings_store import SettingsStore


def test_in_memory_set_get_remove():
    store = SettingsStore()
    assert store.data("a") is None

    store.set(b"one", "a")
    assert store.data("a") == b"one"
    assert "a" in store
    assert store.keys() == ["a"]

    store.remove_object("a")
    assert store.data("a") is None
    assert len(store) == 0


def test_setting_none_removes_key():
    store = SettingsStore()
    store.set(b"one", "a")
    store.set(None, "a")
    assert "a" not in store


def test_remove_missing_key_is_noop():
    store = SettingsStore()
    store.remove_object("missing")
    assert len(store) == 0


def test_separate_handles_do_not_share_state():
    first = SettingsStore()
    second = SettingsStore()
    first.set(b"x", "k")
    assert second.data("k") is None


def test_values_mirrored_to_file(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(path)
    store.set(b"\x00\x01binary", "blob")

    assert path.exists()
    assert not path.with_suffix(".json.tmp").exists()
    reopened = SettingsStore(path)
    assert reopened.data("blob") == b"\x00\x01binary"

    reopened.remove_object("blob")
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_missing_file_is_empty_store(tmp_path):
    store = SettingsStore(tmp_path / "absent.json")
    assert len(store) == 0
    assert not (tmp_path / "absent.json").exists()


def test_unreadable_file_is_empty_store(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{ definitely not json", encoding="utf-8")
    assert len(SettingsStore(path)) == 0

    path.write_text('["not", "a", "mapping"]', encoding="utf-8")
    assert len(SettingsStore(path)) == 0


def test_undecodable_file_is_empty_store(tmp_path):
    path = tmp_path / "settings.json"
    path.write_bytes(b'{"Game": "\xff\xfe"}')
    assert len(SettingsStore(path)) == 0

    path.write_text('{"Game": "été"}', encoding="utf-8")
    assert len(SettingsStore(path)) == 0


def test_failed_write_leaves_store_unchanged(tmp_path):
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    store.set(b"kept", "old")
    path.unlink()
    path.mkdir()

    with pytest.raises(OSError):
        store.set(b"x", "k")
    with pytest.raises(OSError):
        store.remove_object("old")

    assert store.data("k") is None
    assert store.data("old") == b"kept"
    assert not (tmp_path / "settings.json.tmp").exists()
