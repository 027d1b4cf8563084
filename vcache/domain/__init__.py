"""Domain layer: entities and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from vcache.domain.entities import CacheIndex, CacheState
from vcache.domain.exceptions import (
    InvalidVersionException,
    StaleWriteException,
    VersionedCacheException,
    VersionNotNewerException,
)

__all__ = [
    # Entities
    "CacheIndex",
    "CacheState",
    # Exceptions
    "InvalidVersionException",
    "StaleWriteException",
    "VersionedCacheException",
    "VersionNotNewerException",
]
