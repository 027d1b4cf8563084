"""Snapshot of the process-wide cache state (enable flag + global version)."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CacheState:
    """State read from the settings store when a VersionedCache is built.

    Held by the VersionedCache instance instead of module globals. Not
    re-synced: changes made by another process are seen only by caches
    constructed afterwards.
    """

    enabled: bool
    global_version: str

    def with_version(self, version: str) -> "CacheState":
        """Return a copy with global_version replaced."""
        return replace(self, global_version=version)
