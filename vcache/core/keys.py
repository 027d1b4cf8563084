"""Cache key builders. Single place for the versioned key format.

A derived key is PREFIX + name + "_" + version. Names may themselves
contain "_", so a key is only attributed to a name when rebuilding it
from (name, extracted version) gives the same string.
"""

from dataclasses import dataclass

from vcache.core.config import Settings
from vcache.core.constants import (
    CACHE_VERSION_SEP,
    SETTING_KEY_CACHE_INDEX,
    SETTING_KEY_CACHE_VERSION,
    SETTING_KEY_ENABLED,
)


def versioned_key(prefix: str, name: str, version: str) -> str:
    """Key for a cache entry of name at version."""
    return f"{prefix}{name}{CACHE_VERSION_SEP}{version}"


def name_key_prefix(prefix: str, name: str) -> str:
    """Common prefix of every versioned key of name (for enumeration)."""
    return f"{prefix}{name}{CACHE_VERSION_SEP}"


@dataclass(frozen=True)
class SettingKeys:
    """Names of the settings-store entries owned by the versioned cache."""

    enabled: str = SETTING_KEY_ENABLED
    cache_version: str = SETTING_KEY_CACHE_VERSION
    cache_index: str = SETTING_KEY_CACHE_INDEX

    @classmethod
    def from_settings(cls, settings: Settings) -> "SettingKeys":
        """Build from configured key names."""
        return cls(
            enabled=settings.setting_key_enabled,
            cache_version=settings.setting_key_cache_version,
            cache_index=settings.setting_key_cache_index,
        )
