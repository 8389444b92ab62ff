"""
Tests for the API key store.
"""

import json

import pytest

from currencylayer.key_store import KeyStore


class TestKeyStore:
    """Persistence of the API key."""

    def test_empty_store(self, tmp_path):
        store = KeyStore(tmp_path / "missing.json")
        assert store.get_api_key() is None

    def test_set_and_get(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        KeyStore(path).set_api_key("  abc123  ")

        assert KeyStore(path).get_api_key() == "abc123"
        assert json.loads(path.read_text())["api_key"] == "abc123"

    def test_overwrite(self, tmp_path):
        store = KeyStore(tmp_path / "config.json")
        store.set_api_key("first")
        store.set_api_key("second")

        assert store.get_api_key() == "second"

    def test_rejects_empty_key(self, tmp_path):
        store = KeyStore(tmp_path / "config.json")
        with pytest.raises(ValueError):
            store.set_api_key("   ")

    def test_corrupt_file_is_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert KeyStore(path).get_api_key() is None

    def test_non_utf8_file_is_ignored_and_overwritten(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe garbage")
        store = KeyStore(path)

        assert store.get_api_key() is None

        store.set_api_key("fresh-key")
        assert store.get_api_key() == "fresh-key"

    def test_default_path_from_settings(self, tmp_path):
        store = KeyStore()
        assert store.path == tmp_path / "config.json"
