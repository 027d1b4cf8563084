"""Core constants: cache key prefix, settings keys and version defaults.

Single source of truth for key structure. Settings in vcache.core.config
default to these values.
"""

# Prefix of every entry written by the versioned cache
CACHE_KEY_PREFIX = "coding_pioneers_transient_"

# Separator between cache name and version in a derived key
CACHE_VERSION_SEP = "_"

# Version used when none is persisted (or the persisted one is malformed)
DEFAULT_CACHE_VERSION = "1.0.0"

# Exclusive lower bound of the prune sweep
PRUNE_LOWER_BOUND_VERSION = "0.0.0"

# Settings store keys
SETTING_KEY_ENABLED = "cpcachemanager_enabled"
SETTING_KEY_CACHE_VERSION = "cpcachemanager_cache_version"
SETTING_KEY_CACHE_INDEX = "coding_pioneers_transient_index"

# Redis hash holding the settings store
SETTINGS_HASH_KEY = "vcache:settings"

# Enable flag encoding
FLAG_TRUE = "1"
FLAG_FALSE = "0"
TRUTHY_FLAG_VALUES = frozenset({"1", "true", "yes", "on"})

# Version format: MAJOR.MINOR.PATCH, matched anywhere in the string
VERSION_PATTERN = r"\d+\.\d+\.\d+"
