"""Unit tests for infrastructure.persistence.preferences module."""

import json
from unittest.mock import patch

import pytest

from infrastructure.persistence import (
    InMemoryPreferenceStore,
    JSONFilePreferenceStore,
    LayeredPreferenceStore,
    PersistenceError,
    PreferenceStore,
)


class FailingStore(PreferenceStore):
    def get(self, key):
        return None

    async def set(self, key, value):
        raise PersistenceError("read-only")


@pytest.mark.unit
class TestInMemoryPreferenceStore:
    """Tests for InMemoryPreferenceStore."""

    def test_get_missing_returns_none(self):
        assert InMemoryPreferenceStore().get("worldland_language") is None

    def test_initial_values(self):
        store = InMemoryPreferenceStore({"worldland_language": "ko"})
        assert store.get("worldland_language") == "ko"

    @pytest.mark.asyncio
    async def test_set_then_get(self):
        store = InMemoryPreferenceStore()
        await store.set("worldland_language", "ja")
        assert store.get("worldland_language") == "ja"

    @pytest.mark.asyncio
    async def test_clear(self):
        store = InMemoryPreferenceStore()
        await store.set("worldland_language", "ja")
        store.clear()
        assert store.get("worldland_language") is None


@pytest.mark.unit
class TestJSONFilePreferenceStore:
    """Tests for JSONFilePreferenceStore."""

    def test_missing_file_returns_none(self, tmp_path):
        store = JSONFilePreferenceStore(tmp_path / "prefs.json")
        assert store.get("worldland_language") is None

    @pytest.mark.asyncio
    async def test_set_writes_json_document(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        store = JSONFilePreferenceStore(path)

        await store.set("worldland_language", "ar")

        assert json.loads(path.read_text(encoding="utf-8")) == {
            "worldland_language": "ar"
        }
        assert store.get("worldland_language") == "ar"

    @pytest.mark.asyncio
    async def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        store = JSONFilePreferenceStore(path)

        await store.set("worldland_language", "fr")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"theme": "dark", "worldland_language": "fr"}

    @pytest.mark.asyncio
    async def test_set_leaves_no_temp_files(self, tmp_path):
        store = JSONFilePreferenceStore(tmp_path / "prefs.json")
        await store.set("worldland_language", "es")
        assert [p.name for p in tmp_path.iterdir()] == ["prefs.json"]

    def test_corrupt_file_returns_none(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")
        assert JSONFilePreferenceStore(path).get("worldland_language") is None

    def test_non_object_document_returns_none(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text('["ko"]', encoding="utf-8")
        assert JSONFilePreferenceStore(path).get("worldland_language") is None

    @pytest.mark.asyncio
    async def test_write_failure_raises_persistence_error(self, tmp_path):
        store = JSONFilePreferenceStore(tmp_path / "prefs.json")

        with patch(
            "infrastructure.persistence.preferences.tempfile.mkstemp",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(PersistenceError):
                await store.set("worldland_language", "ko")


@pytest.mark.unit
class TestLayeredPreferenceStore:
    """Tests for LayeredPreferenceStore."""

    def test_requires_a_layer(self):
        with pytest.raises(ValueError):
            LayeredPreferenceStore([])

    def test_get_returns_first_layer_with_value(self):
        store = LayeredPreferenceStore(
            [
                InMemoryPreferenceStore(),
                InMemoryPreferenceStore({"worldland_language": "ko"}),
                InMemoryPreferenceStore({"worldland_language": "ja"}),
            ]
        )
        assert store.get("worldland_language") == "ko"

    @pytest.mark.asyncio
    async def test_set_writes_every_layer(self):
        first = InMemoryPreferenceStore()
        second = InMemoryPreferenceStore()
        store = LayeredPreferenceStore([first, second])

        await store.set("worldland_language", "ru")

        assert first.get("worldland_language") == "ru"
        assert second.get("worldland_language") == "ru"

    @pytest.mark.asyncio
    async def test_failing_layer_does_not_skip_others(self):
        healthy = InMemoryPreferenceStore()
        store = LayeredPreferenceStore([FailingStore(), healthy])

        with pytest.raises(PersistenceError, match="read-only"):
            await store.set("worldland_language", "zh")

        assert healthy.get("worldland_language") == "zh"
