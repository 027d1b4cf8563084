"""Versioned cache: named entries tagged with a MAJOR.MINOR.PATCH version.

Keys are PREFIX + name + "_" + version. A global version is used when a
call does not pass one; bumping it prunes entries of every indexed name
below the new version. The index (name -> highest version saved) lives
in the settings store and is read-modify-written on save without any
locking: concurrent saves of the same name can lose an index update,
and the index write and entry write are not atomic together.

Versions compare as strings ("10.0.0" < "9.0.0").
"""

from __future__ import annotations

import logging
from typing import Any

from vcache.application.interfaces.stores import IKeyValueStore, ISettingsStore
from vcache.application.services.lifecycle_service import parse_flag
from vcache.application.services.version_validator import VersionValidator
from vcache.core.constants import (
    CACHE_KEY_PREFIX,
    DEFAULT_CACHE_VERSION,
    PRUNE_LOWER_BOUND_VERSION,
)
from vcache.core.keys import SettingKeys, name_key_prefix, versioned_key
from vcache.domain.entities import CacheIndex, CacheState
from vcache.domain.exceptions import (
    InvalidVersionException,
    StaleWriteException,
    VersionedCacheException,
    VersionNotNewerException,
)

logger = logging.getLogger(__name__)


class VersionedCache:
    """Versioned cache over a key-value store and a settings store.

    State (enable flag and global version) is read from the settings
    store once, at construction. The boolean methods (set_global_version,
    save, delete) never raise for rejected input; apply_global_version
    and store raise VersionedCacheException subclasses instead.
    """

    def __init__(
        self,
        kv_store: IKeyValueStore,
        settings_store: ISettingsStore,
        *,
        key_prefix: str = CACHE_KEY_PREFIX,
        default_version: str = DEFAULT_CACHE_VERSION,
        setting_keys: SettingKeys | None = None,
        strict_versions: bool = False,
    ) -> None:
        """Initialize and load state from the settings store.

        Args:
            kv_store: Backend for cache entries.
            settings_store: Backend for enable flag, global version and index.
            key_prefix: Prefix of every derived key.
            default_version: Global version when none (or an invalid one) is persisted.
            setting_keys: Settings-store key names.
            strict_versions: Also validate explicit per-call versions.
        """
        self.kv_store = kv_store
        self.settings_store = settings_store
        self.key_prefix = key_prefix
        self.default_version = default_version
        self.setting_keys = setting_keys or SettingKeys()
        self.strict_versions = strict_versions
        self._state = self._load_state()

    def _load_state(self) -> CacheState:
        version = self.default_version
        persisted = self.settings_store.get_setting(self.setting_keys.cache_version)
        if persisted:
            if VersionValidator.is_valid_version(persisted):
                version = persisted
            else:
                logger.warning(
                    "Ignoring malformed persisted cache version %r; using %s",
                    persisted,
                    version,
                )
        enabled = parse_flag(self.settings_store.get_setting(self.setting_keys.enabled))
        return CacheState(enabled=enabled, global_version=version)

    @property
    def global_version(self) -> str:
        """Version used when a call does not pass one."""
        return self._state.global_version

    @property
    def enabled(self) -> bool:
        """Enable flag as read at construction (gates reads only)."""
        return self._state.enabled

    @property
    def state(self) -> CacheState:
        return self._state

    def derive_key(self, name: str, version: str | None = None) -> str:
        """Return the storage key for name at version (default: global version)."""
        return versioned_key(self.key_prefix, name, version or self.global_version)

    # ---- Global version ----

    def apply_global_version(
        self, new_version: str, cleanup: bool = True, force: bool = False
    ) -> None:
        """Adopt and persist a new global version, then optionally prune.

        Args:
            new_version: MAJOR.MINOR.PATCH version.
            cleanup: Prune entries below new_version for every indexed name.
            force: Accept a version that is not newer than the current one.

        Raises:
            InvalidVersionException: new_version is malformed.
            VersionNotNewerException: new_version <= current and not force.
        """
        if not VersionValidator.is_valid_version(new_version):
            raise InvalidVersionException(new_version)
        current = self.global_version
        if not force and not VersionValidator.is_newer_version(new_version, current):
            raise VersionNotNewerException(new_version, current)

        self._state = self._state.with_version(new_version)
        self.settings_store.set_setting(self.setting_keys.cache_version, new_version)
        logger.info("Global cache version changed: %s -> %s", current, new_version)
        if cleanup:
            self.prune_stale_versions(use_global_version_as_cutoff=True)

    def set_global_version(
        self, new_version: str, cleanup: bool = True, force: bool = False
    ) -> bool:
        """Boolean form of apply_global_version. Returns False on rejection."""
        try:
            self.apply_global_version(new_version, cleanup=cleanup, force=force)
        except VersionedCacheException as e:
            logger.warning("Global cache version rejected: %s", e.message)
            return False
        return True

    # ---- Entries ----

    def get(self, name: str, version: str | None = None) -> Any:
        """Return the cached payload, or None on miss or when disabled.

        When the enable flag is off the store is not queried at all.
        """
        if not self.enabled:
            logger.debug("Cache disabled, skipping read of %r", name)
            return None
        if not self._explicit_version_ok(version):
            return None
        key = self.derive_key(name, version)
        value = self.kv_store.get(key)
        logger.debug("Cache %s: %s", "MISS" if value is None else "HIT", key)
        return value

    def store(
        self,
        name: str,
        payload: Any,
        version: str | None = None,
        ttl_seconds: int = 0,
    ) -> None:
        """Write payload for name at version and raise the name's watermark.

        An unusable stored index is replaced by a single-entry index. A
        save at the watermark version overwrites; a save below it is
        rejected without touching the stored entry.

        Args:
            name: Cache name.
            payload: Opaque value handed to the key-value store.
            version: Entry version (default: global version).
            ttl_seconds: Expiry in seconds; 0 means no expiry.

        Raises:
            InvalidVersionException: strict_versions is on and version is malformed.
            StaleWriteException: version is older than the indexed watermark.
        """
        if version and self.strict_versions and not VersionValidator.is_valid_version(version):
            raise InvalidVersionException(version)
        effective = version or self.global_version

        index = self._load_index()
        if index is None:
            self._persist_index(CacheIndex.single(name, effective))
        else:
            indexed = index.get(name)
            if indexed is None or indexed < effective:
                index.record(name, effective)
                self._persist_index(index)
            elif indexed > effective:
                raise StaleWriteException(name, effective, indexed)

        key = self.derive_key(name, version)
        if not self.kv_store.set(key, payload, ttl_seconds):
            logger.warning("Cache store did not accept write of %s", key)

    def save(
        self,
        name: str,
        payload: Any,
        version: str | None = None,
        ttl_seconds: int = 0,
    ) -> bool:
        """Boolean form of store. Returns False when the save is rejected."""
        try:
            self.store(name, payload, version=version, ttl_seconds=ttl_seconds)
        except VersionedCacheException as e:
            logger.warning("Cache save rejected: %s", e.message)
            return False
        return True

    def delete(self, name: str, version: str | None = None) -> bool:
        """Delete the entry for name at version. The index is not changed."""
        if not self._explicit_version_ok(version):
            return False
        return self.kv_store.delete(self.derive_key(name, version))

    # ---- Index and pruning ----

    def get_index(self) -> CacheIndex:
        """Return the stored index (empty when missing or malformed)."""
        return self._load_index() or CacheIndex()

    def prune_stale_versions(self, use_global_version_as_cutoff: bool = False) -> int:
        """Delete stored entries older than a cutoff, for every indexed name.

        The cutoff is the name's watermark, or the global version when
        use_global_version_as_cutoff is set. Entries with
        "0.0.0" < version < cutoff (string comparison) are deleted.

        Returns:
            Number of entries deleted.
        """
        deleted = 0
        for name, indexed_version in self.get_index().items():
            cutoff = self.global_version if use_global_version_as_cutoff else indexed_version
            for version in self._stored_versions(name):
                if not PRUNE_LOWER_BOUND_VERSION < version < cutoff:
                    continue
                if self.kv_store.delete(self.derive_key(name, version)):
                    deleted += 1
                    logger.debug("Pruned %s version %s (cutoff %s)", name, version, cutoff)
        if deleted:
            logger.info("Pruned %s stale cache entries", deleted)
        return deleted

    def _stored_versions(self, name: str) -> list[str]:
        """Versions stored for name, from the key-value store's key listing."""
        versions = set()
        for key in self.kv_store.iter_keys(name_key_prefix(self.key_prefix, name)):
            version = VersionValidator.extract_version(key)
            # Skip keys of other names that share this prefix (e.g. "widget_big_1.0.0").
            if version and key == versioned_key(self.key_prefix, name, version):
                versions.add(version)
        return sorted(versions)

    def _load_index(self) -> CacheIndex | None:
        blob = self.settings_store.get_setting(self.setting_keys.cache_index)
        index = CacheIndex.from_blob(blob)
        if blob and index is None:
            logger.warning("Stored cache index is malformed; treating it as absent")
        return index

    def _persist_index(self, index: CacheIndex) -> None:
        self.settings_store.set_setting(self.setting_keys.cache_index, index.to_blob())

    def _explicit_version_ok(self, version: str | None) -> bool:
        if version and self.strict_versions and not VersionValidator.is_valid_version(version):
            logger.warning("Rejected malformed cache version %r", version)
            return False
        return True
