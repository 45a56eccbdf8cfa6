"""
Tests for session persistence backends.
"""
import json
import pytest

from app.core.config import settings
from app.services.session_store import (
    PLAN_SLOT,
    PROFILE_SLOT,
    InMemorySessionStore,
    JsonFileSessionStore,
    open_session_store,
)


@pytest.fixture(params=["memory", "json"])
def store_factory(request, tmp_path):
    InMemorySessionStore.reset_all()
    path = str(tmp_path / "nested" / "sessions.json")
    if request.param == "memory":
        yield lambda session_id: InMemorySessionStore(session_id)
    else:
        yield lambda session_id: JsonFileSessionStore(session_id, filepath=path)
    InMemorySessionStore.reset_all()


class TestSessionStore:

    def test_get_missing_slot(self, store_factory):
        assert store_factory("a").get(PLAN_SLOT) is None

    def test_set_get_clear(self, store_factory):
        store = store_factory("a")
        store.set(PLAN_SLOT, '{"x": 1}')

        assert store.get(PLAN_SLOT) == '{"x": 1}'

        store.clear()
        assert store.get(PLAN_SLOT) is None

    def test_unknown_slot_is_rejected(self, store_factory):
        with pytest.raises(KeyError):
            store_factory("a").set("cart", "{}")

    def test_sessions_are_isolated(self, store_factory):
        store_factory("a").set(PROFILE_SLOT, '{"name": "Sam"}')

        assert store_factory("b").get(PROFILE_SLOT) is None
        store_factory("b").clear()
        assert store_factory("a").get(PROFILE_SLOT) == '{"name": "Sam"}'

    def test_save_and_load_round_trip(self, store_factory, sample_plan, sample_profile):
        store_factory("a").save(sample_plan, sample_profile)

        plan, profile = store_factory("a").load()

        assert plan == sample_plan
        assert profile == sample_profile

    def test_load_requires_both_slots(self, store_factory):
        store = store_factory("a")
        store.set(PLAN_SLOT, json.dumps({"workoutPlan": []}))

        assert store.load() is None

    def test_load_ignores_corrupt_slot(self, store_factory):
        store = store_factory("a")
        store.set(PLAN_SLOT, "{not json")
        store.set(PROFILE_SLOT, "{}")

        assert store.load() is None


class TestJsonFileSessionStore:

    def test_persists_across_instances(self, tmp_path, sample_plan, sample_profile):
        path = str(tmp_path / "sessions.json")
        JsonFileSessionStore("a", filepath=path).save(sample_plan, sample_profile)

        with open(path, encoding="utf-8") as f:
            assert "a" in json.load(f)
        assert JsonFileSessionStore("a", filepath=path).load() == (sample_plan, sample_profile)

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "sessions.json"
        path.write_text("garbage", encoding="utf-8")

        assert JsonFileSessionStore("a", filepath=str(path)).get(PLAN_SLOT) is None


class TestOpenSessionStore:

    def test_memory_backend(self, monkeypatch):
        monkeypatch.setattr(settings, "SESSION_BACKEND", "memory")

        assert isinstance(open_session_store("a"), InMemorySessionStore)

    def test_json_backend(self, monkeypatch):
        monkeypatch.setattr(settings, "SESSION_BACKEND", "json")

        store = open_session_store("a")
        assert isinstance(store, JsonFileSessionStore)
        assert store.filepath == settings.SESSION_FILE
