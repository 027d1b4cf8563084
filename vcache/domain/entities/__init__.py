"""Domain entities: cache index and cache state."""

from vcache.domain.entities.cache_index import CacheIndex
from vcache.domain.entities.cache_state import CacheState

__all__ = ["CacheIndex", "CacheState"]
