"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The default cache version is validated at load time.
"""

import re
from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vcache.core.constants import (
    CACHE_KEY_PREFIX,
    DEFAULT_CACHE_VERSION,
    SETTING_KEY_CACHE_INDEX,
    SETTING_KEY_CACHE_VERSION,
    SETTING_KEY_ENABLED,
    SETTINGS_HASH_KEY,
    VERSION_PATTERN,
)


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. default_cache_version must
    contain a MAJOR.MINOR.PATCH version (validated in validate_cache).
    """

    # App
    app_name: str = "vcache"
    app_version: str = "0.2.0"
    debug: bool = False

    # Redis (backs both the key-value store and the settings store)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: int = 5

    # Versioned cache
    cache_key_prefix: str = CACHE_KEY_PREFIX
    default_cache_version: str = DEFAULT_CACHE_VERSION

    # Settings store
    settings_hash_key: str = SETTINGS_HASH_KEY
    setting_key_enabled: str = SETTING_KEY_ENABLED
    setting_key_cache_version: str = SETTING_KEY_CACHE_VERSION
    setting_key_cache_index: str = SETTING_KEY_CACHE_INDEX

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache(self) -> "Settings":
        """Validate cache key prefix and default version."""
        if not self.cache_key_prefix:
            raise ValueError("CACHE_KEY_PREFIX must be a non-empty string")
        if not re.search(VERSION_PATTERN, self.default_cache_version):
            raise ValueError(
                f"DEFAULT_CACHE_VERSION must look like MAJOR.MINOR.PATCH, "
                f"got: {self.default_cache_version!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars
    so the next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
