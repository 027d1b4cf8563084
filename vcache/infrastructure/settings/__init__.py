"""Settings stores: Redis hash and in-memory.

Both implement vcache.application.interfaces.ISettingsStore.
"""

from vcache.infrastructure.settings.memory_settings_store import InMemorySettingsStore
from vcache.infrastructure.settings.redis_settings_store import RedisSettingsStore

__all__ = ["InMemorySettingsStore", "RedisSettingsStore"]
