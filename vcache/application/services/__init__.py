"""Application services: version validation, versioned cache, lifecycle hooks."""

from vcache.application.services.lifecycle_service import CacheLifecycleService
from vcache.application.services.version_validator import VersionValidator
from vcache.application.services.versioned_cache import VersionedCache

__all__ = ["CacheLifecycleService", "VersionValidator", "VersionedCache"]
