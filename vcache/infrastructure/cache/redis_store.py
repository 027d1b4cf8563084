"""Redis-backed key-value store for versioned cache entries.

Payloads are stored as JSON. A TTL of 0 stores the key without expiry.
Redis errors are logged and reported as a miss / False, never raised,
so a Redis outage degrades to "no cache" instead of failing requests.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

import redis

from vcache.core.config import Settings
from vcache.infrastructure.redis_client import build_redis_client

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = "\\*?[]^"


def escape_glob(value: str) -> str:
    """Escape Redis glob metacharacters so value matches literally in SCAN MATCH."""
    return "".join(f"\\{c}" if c in _GLOB_SPECIAL else c for c in value)


class RedisKeyValueStore:
    """Blocking Redis key-value store with TTL support.

    Call connect() at startup (or pass a client) and disconnect() at
    shutdown. A failed connection leaves the store unavailable: reads
    miss and writes return False.
    """

    scan_count = 500

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional client for testing or DI; treated as connected.
            settings: Optional Settings used by connect() to build a client.
        """
        self.redis = redis_client
        self.settings = settings
        self._connected = redis_client is not None

    def connect(self) -> None:
        """Build a client from settings and ping it."""
        if self.redis is not None:
            return
        client = build_redis_client(self.settings)
        try:
            client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s",
            client.connection_pool.connection_kwargs.get("host"),
            client.connection_pool.connection_kwargs.get("port"),
        )

    def disconnect(self) -> None:
        """Close the Redis connection."""
        if self.redis is not None:
            self.redis.close()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value, or None if missing or unavailable."""
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = self.redis.get(key)
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None
        if value is None:
            return None
        try:
            return json.loads(value)
        except ValueError:
            logger.warning("Cache value for key %s is not JSON; treating as miss", key)
            return None

    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store value (JSON-serializable). ttl in seconds; 0 means no expiry."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Cache value for key %s is not JSON-serializable", key)
            return False
        try:
            if ttl > 0:
                self.redis.set(key, serialized, ex=ttl)
            else:
                self.redis.set(key, serialized)
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            return False
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    def delete(self, key: str) -> bool:
        """Remove key. Returns True if a key was deleted."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            removed = self.redis.delete(key)
        except redis.RedisError:
            logger.exception("Cache delete error for key %s", key)
            return False
        logger.debug("Cache DELETE: %s (%s)", key, removed)
        return bool(removed)

    def iter_keys(self, prefix: str) -> Iterator[str]:
        """Yield keys starting with prefix using SCAN (non-blocking on the server).

        Stops early, after logging, if Redis fails mid-scan.
        """
        if not self.is_available() or self.redis is None:
            return
        pattern = f"{escape_glob(prefix)}*"
        try:
            for key in self.redis.scan_iter(match=pattern, count=self.scan_count):
                yield key
        except redis.RedisError:
            logger.exception("Cache scan error for prefix %s", prefix)
