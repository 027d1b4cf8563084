"""Tests for operator scripts (bump version, prune, lifecycle) over in-memory stores."""

import pytest

from scripts import bump_cache_version, cache_lifecycle, prune_cache
from vcache.application.services.lifecycle_service import CacheLifecycleService
from vcache.application.services.versioned_cache import VersionedCache
from vcache.core.constants import SETTING_KEY_CACHE_VERSION, SETTING_KEY_ENABLED
from vcache.infrastructure.cache.memory_store import InMemoryKeyValueStore
from vcache.infrastructure.settings.memory_settings_store import InMemorySettingsStore


@pytest.fixture
def stores(
    monkeypatch: pytest.MonkeyPatch,
) -> tuple[InMemoryKeyValueStore, InMemorySettingsStore]:
    """Point every script at the same in-memory stores."""
    kv_store = InMemoryKeyValueStore()
    settings_store = InMemorySettingsStore({SETTING_KEY_ENABLED: "1"})

    def build_cache() -> VersionedCache:
        return VersionedCache(kv_store, settings_store)

    for module in (bump_cache_version, prune_cache):
        monkeypatch.setattr(module, "build_versioned_cache", build_cache)
    monkeypatch.setattr(
        cache_lifecycle,
        "build_lifecycle_service",
        lambda: CacheLifecycleService(settings_store),
    )
    return kv_store, settings_store


class TestBumpCacheVersion:
    def test_bump_prunes_old_entries(self, stores, capsys: pytest.CaptureFixture) -> None:
        kv_store, settings_store = stores
        cache = VersionedCache(kv_store, settings_store)
        cache.save("widget", "old")
        assert bump_cache_version.main(["2.0.0"]) == 0
        assert settings_store.get_setting(SETTING_KEY_CACHE_VERSION) == "2.0.0"
        assert len(kv_store) == 0
        assert "1.0.0 -> 2.0.0" in capsys.readouterr().out

    def test_no_cleanup_keeps_entries(self, stores) -> None:
        kv_store, settings_store = stores
        VersionedCache(kv_store, settings_store).save("widget", "old")
        assert bump_cache_version.main(["2.0.0", "--no-cleanup"]) == 0
        assert len(kv_store) == 1

    def test_rejected_version_exit_code(self, stores, capsys: pytest.CaptureFixture) -> None:
        assert bump_cache_version.main(["0.5.0"]) == 1
        assert "rejected" in capsys.readouterr().err
        assert bump_cache_version.main(["0.5.0", "--force"]) == 0

    @pytest.mark.parametrize("argv", [[], ["1.0.0", "2.0.0"], ["2.0.0", "--bogus"]])
    def test_usage_errors(self, stores, argv: list[str], capsys: pytest.CaptureFixture) -> None:
        assert bump_cache_version.main(argv) == 1
        assert "Usage" in capsys.readouterr().err


class TestPruneCache:
    def test_prune_below_watermark(self, stores, capsys: pytest.CaptureFixture) -> None:
        kv_store, settings_store = stores
        cache = VersionedCache(kv_store, settings_store)
        cache.save("widget", "a", "1.0.0")
        cache.save("widget", "b", "1.1.0")
        assert prune_cache.main([]) == 0
        assert "Deleted 1" in capsys.readouterr().out
        assert cache.get("widget", "1.1.0") == "b"

    def test_prune_use_global(self, stores) -> None:
        kv_store, settings_store = stores
        settings_store.set_setting(SETTING_KEY_CACHE_VERSION, "3.0.0")
        VersionedCache(kv_store, settings_store).save("widget", "a", "2.0.0")
        assert prune_cache.main(["--use-global"]) == 0
        assert len(kv_store) == 0

    def test_usage_error(self, stores) -> None:
        assert prune_cache.main(["--all"]) == 1


class TestCacheLifecycle:
    def test_hooks(self, stores) -> None:
        _, settings_store = stores
        assert cache_lifecycle.main(["uninstall"]) == 0
        assert settings_store.get_setting(SETTING_KEY_ENABLED) == "0"
        assert cache_lifecycle.main(["install"]) == 0
        assert settings_store.get_setting(SETTING_KEY_ENABLED) == "1"
        assert cache_lifecycle.main(["remove"]) == 0
        assert settings_store.get_setting(SETTING_KEY_ENABLED) is None

    def test_unknown_hook(self, stores) -> None:
        assert cache_lifecycle.main(["purge"]) == 1
