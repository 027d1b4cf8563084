"""Settings store kept in a single Redis hash.

Unlike the key-value store, Redis errors propagate: losing a write of
the global version or the cache index must not look like success.
"""

from __future__ import annotations

import logging

import redis

from vcache.core.config import Settings, get_settings
from vcache.infrastructure.redis_client import build_redis_client

logger = logging.getLogger(__name__)


class RedisSettingsStore:
    """Settings as fields of one Redis hash (HGET / HSET / HDEL)."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional client; built from settings when omitted.
            settings: Optional Settings; defaults to get_settings().
        """
        settings = settings or get_settings()
        self.redis = redis_client if redis_client is not None else build_redis_client(settings)
        self.hash_key = settings.settings_hash_key

    def get_setting(self, key: str) -> str | None:
        value = self.redis.hget(self.hash_key, key)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set_setting(self, key: str, value: str) -> None:
        self.redis.hset(self.hash_key, key, value)
        logger.debug("Setting SET: %s.%s", self.hash_key, key)

    def delete_setting(self, key: str) -> None:
        self.redis.hdel(self.hash_key, key)
        logger.debug("Setting DELETE: %s.%s", self.hash_key, key)
