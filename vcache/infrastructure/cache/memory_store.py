"""In-process key-value store with TTL, for tests and single-process use."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from typing import Any


class InMemoryKeyValueStore:
    """Dict-backed key-value store. Expired keys are dropped lazily on access.

    Values are stored as given (no serialization).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._data: dict[str, tuple[Any, float | None]] = {}

    def _expired(self, key: str) -> bool:
        _, expires_at = self._data[key]
        return expires_at is not None and self._clock() >= expires_at

    def get(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        if self._expired(key):
            del self._data[key]
            return None
        return self._data[key][0]

    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        expires_at = self._clock() + ttl if ttl > 0 else None
        self._data[key] = (value, expires_at)
        return True

    def delete(self, key: str) -> bool:
        if key not in self._data:
            return False
        expired = self._expired(key)
        del self._data[key]
        return not expired

    def iter_keys(self, prefix: str) -> Iterator[str]:
        # Snapshot so callers may delete while iterating.
        for key in list(self._data):
            if key.startswith(prefix) and key in self._data and not self._expired(key):
                yield key

    def __len__(self) -> int:
        return sum(1 for key in list(self._data) if not self._expired(key))
