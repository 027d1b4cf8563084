"""Pytest configuration and fixtures for vcache.

Service tests run against the in-memory stores; Redis adapters are
tested with a MagicMock client. No Redis server is needed.
"""

from collections.abc import Iterator

import pytest

from vcache.application.services.lifecycle_service import CacheLifecycleService
from vcache.application.services.versioned_cache import VersionedCache
from vcache.core.config import get_settings
from vcache.core.constants import SETTING_KEY_ENABLED
from vcache.infrastructure.cache.memory_store import InMemoryKeyValueStore
from vcache.infrastructure.settings.memory_settings_store import InMemorySettingsStore


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached Settings so env overrides in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def kv_store(clock: FakeClock) -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    """Settings store with the cache enabled (as after the install hook)."""
    return InMemorySettingsStore({SETTING_KEY_ENABLED: "1"})


@pytest.fixture
def cache(
    kv_store: InMemoryKeyValueStore, settings_store: InMemorySettingsStore
) -> VersionedCache:
    """Enabled VersionedCache at the default global version 1.0.0."""
    return VersionedCache(kv_store, settings_store)


@pytest.fixture
def lifecycle(settings_store: InMemorySettingsStore) -> CacheLifecycleService:
    return CacheLifecycleService(settings_store)
