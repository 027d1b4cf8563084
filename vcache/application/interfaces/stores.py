"""Store protocols used by VersionedCache and the lifecycle hooks."""

from collections.abc import Iterator
from typing import Any, Protocol


class IKeyValueStore(Protocol):
    """Key-value store with per-key TTL (e.g. Redis).

    Single get/set/delete calls are expected to be atomic on their own;
    nothing spans more than one key.
    """

    def get(self, key: str) -> Any:
        """Return stored value or None on miss/expiry."""
        ...

    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store value; ttl in seconds, 0 means no expiry. Returns True on success."""
        ...

    def delete(self, key: str) -> bool:
        """Remove key. Returns True if a value was deleted."""
        ...

    def iter_keys(self, prefix: str) -> Iterator[str]:
        """Yield stored keys starting with prefix (order unspecified)."""
        ...


class ISettingsStore(Protocol):
    """Named scalar settings (enable flag, global version, index blob)."""

    def get_setting(self, key: str) -> str | None:
        """Return the setting value or None if unset."""
        ...

    def set_setting(self, key: str, value: str) -> None:
        """Create or overwrite a setting."""
        ...

    def delete_setting(self, key: str) -> None:
        """Remove a setting; no-op if unset."""
        ...
