"""Composition root: build stores and services from settings.

Scripts and host applications use these instead of wiring Redis
clients by hand. Both Redis stores share one client.
"""

from __future__ import annotations

from vcache.application.services.lifecycle_service import CacheLifecycleService
from vcache.application.services.versioned_cache import VersionedCache
from vcache.core.config import Settings, get_settings
from vcache.core.keys import SettingKeys
from vcache.infrastructure.cache.redis_store import RedisKeyValueStore
from vcache.infrastructure.redis_client import build_redis_client
from vcache.infrastructure.settings.redis_settings_store import RedisSettingsStore


def build_redis_stores(
    settings: Settings | None = None,
) -> tuple[RedisKeyValueStore, RedisSettingsStore]:
    """Return (key-value store, settings store) sharing one Redis client."""
    settings = settings or get_settings()
    client = build_redis_client(settings)
    return (
        RedisKeyValueStore(redis_client=client, settings=settings),
        RedisSettingsStore(redis_client=client, settings=settings),
    )


def build_versioned_cache(settings: Settings | None = None) -> VersionedCache:
    """VersionedCache over Redis, configured from settings."""
    settings = settings or get_settings()
    kv_store, settings_store = build_redis_stores(settings)
    return VersionedCache(
        kv_store,
        settings_store,
        key_prefix=settings.cache_key_prefix,
        default_version=settings.default_cache_version,
        setting_keys=SettingKeys.from_settings(settings),
    )


def build_lifecycle_service(settings: Settings | None = None) -> CacheLifecycleService:
    """Lifecycle hooks over the Redis settings store."""
    settings = settings or get_settings()
    return CacheLifecycleService(
        RedisSettingsStore(settings=settings),
        setting_keys=SettingKeys.from_settings(settings),
    )
