"""Tests for the in-memory key-value and settings stores."""

from vcache.infrastructure.cache.memory_store import InMemoryKeyValueStore
from vcache.infrastructure.settings.memory_settings_store import InMemorySettingsStore


class TestInMemoryKeyValueStore:
    def test_get_set_delete(self, kv_store: InMemoryKeyValueStore) -> None:
        assert kv_store.get("k") is None
        assert kv_store.set("k", {"a": 1}) is True
        assert kv_store.get("k") == {"a": 1}
        assert kv_store.delete("k") is True
        assert kv_store.delete("k") is False
        assert kv_store.get("k") is None

    def test_ttl_expiry(self, kv_store: InMemoryKeyValueStore, clock) -> None:
        kv_store.set("k", "v", ttl=10)
        clock.advance(9.5)
        assert kv_store.get("k") == "v"
        clock.advance(0.5)
        assert kv_store.get("k") is None
        assert len(kv_store) == 0

    def test_delete_expired_returns_false(self, kv_store: InMemoryKeyValueStore, clock) -> None:
        kv_store.set("k", "v", ttl=1)
        clock.advance(2)
        assert kv_store.delete("k") is False

    def test_set_resets_ttl(self, kv_store: InMemoryKeyValueStore, clock) -> None:
        kv_store.set("k", "v", ttl=1)
        kv_store.set("k", "v2")
        clock.advance(100)
        assert kv_store.get("k") == "v2"

    def test_iter_keys_by_prefix(self, kv_store: InMemoryKeyValueStore, clock) -> None:
        kv_store.set("p_a_1.0.0", 1)
        kv_store.set("p_a_2.0.0", 2)
        kv_store.set("p_b_1.0.0", 3)
        kv_store.set("p_a_0.1.0", 4, ttl=1)
        clock.advance(5)
        assert sorted(kv_store.iter_keys("p_a_")) == ["p_a_1.0.0", "p_a_2.0.0"]

    def test_iter_keys_allows_delete_while_iterating(
        self, kv_store: InMemoryKeyValueStore
    ) -> None:
        for i in range(3):
            kv_store.set(f"p_{i}", i)
        for key in kv_store.iter_keys("p_"):
            kv_store.delete(key)
        assert len(kv_store) == 0


class TestInMemorySettingsStore:
    def test_get_set_delete(self) -> None:
        store = InMemorySettingsStore({"a": "1"})
        assert store.get_setting("a") == "1"
        store.set_setting("b", "2")
        store.delete_setting("a")
        store.delete_setting("missing")
        assert store.as_dict() == {"b": "2"}
