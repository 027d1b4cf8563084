"""Lifecycle hooks for the host application: install, uninstall, remove.

The enable flag gates cache reads only. Install/uninstall flip it;
remove deletes the flag and the persisted global version. The cache
index and stored entries are left in place on remove.
"""

from __future__ import annotations

import logging

from vcache.application.interfaces.stores import ISettingsStore
from vcache.core.constants import FLAG_FALSE, FLAG_TRUE, TRUTHY_FLAG_VALUES
from vcache.core.keys import SettingKeys

logger = logging.getLogger(__name__)


def encode_flag(enabled: bool) -> str:
    """Settings-store representation of the enable flag."""
    return FLAG_TRUE if enabled else FLAG_FALSE


def parse_flag(value: str | None) -> bool:
    """Read the enable flag; unset or unrecognised values mean disabled."""
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_FLAG_VALUES


class CacheLifecycleService:
    """Install / uninstall / remove hooks over the settings store."""

    def __init__(
        self,
        settings_store: ISettingsStore,
        setting_keys: SettingKeys | None = None,
    ) -> None:
        self.settings_store = settings_store
        self.setting_keys = setting_keys or SettingKeys()

    def on_install(self) -> None:
        """Enable cache reads."""
        self.settings_store.set_setting(self.setting_keys.enabled, encode_flag(True))
        logger.info("Versioned cache enabled")

    def on_uninstall(self) -> None:
        """Disable cache reads; writes and deletes keep working."""
        self.settings_store.set_setting(self.setting_keys.enabled, encode_flag(False))
        logger.info("Versioned cache disabled")

    def on_remove(self) -> None:
        """Delete the enable flag and the persisted global version.

        The cache index and entries are not touched.
        """
        self.settings_store.delete_setting(self.setting_keys.enabled)
        self.settings_store.delete_setting(self.setting_keys.cache_version)
        logger.info(
            "Versioned cache settings removed (index %r kept)",
            self.setting_keys.cache_index,
        )

    def is_enabled(self) -> bool:
        """Return the current persisted enable flag."""
        return parse_flag(self.settings_store.get_setting(self.setting_keys.enabled))
