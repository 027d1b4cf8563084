"""Key-value stores for cache entries: Redis and in-memory.

Both implement vcache.application.interfaces.IKeyValueStore.
"""

from vcache.infrastructure.cache.memory_store import InMemoryKeyValueStore
from vcache.infrastructure.cache.redis_store import RedisKeyValueStore, escape_glob

__all__ = ["InMemoryKeyValueStore", "RedisKeyValueStore", "escape_glob"]
