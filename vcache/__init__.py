"""vcache: versioned cache layer over a key-value store with expiry.

Cache entries are keyed by (name, version). Bumping the global version
invalidates entries of older versions without an explicit purge step.
"""

from vcache.application.services.versioned_cache import VersionedCache

__all__ = ["VersionedCache"]
