"""Domain exceptions for the versioned cache.

The public VersionedCache API keeps a boolean success contract; these
exceptions carry the reason a call was rejected. They are raised by the
raising variants (apply_global_version, store) and logged by the
boolean wrappers.
"""

from typing import Any


class VersionedCacheException(Exception):
    """Base exception for all versioned cache errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. name, version).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class InvalidVersionException(VersionedCacheException):
    """Raised when a version string has no MAJOR.MINOR.PATCH part."""

    def __init__(self, version: Any) -> None:
        super().__init__(
            f"Invalid cache version {version!r}: expected MAJOR.MINOR.PATCH",
            "INVALID_VERSION",
            {"version": version},
        )


class VersionNotNewerException(VersionedCacheException):
    """Raised when a global version bump is not newer than the current one."""

    def __init__(self, version: str, current_version: str) -> None:
        super().__init__(
            f"Cache version {version!r} is not newer than {current_version!r}",
            "VERSION_NOT_NEWER",
            {"version": version, "current_version": current_version},
        )


class StaleWriteException(VersionedCacheException):
    """Raised when saving at a version older than the name's watermark."""

    def __init__(self, name: str, version: str, indexed_version: str) -> None:
        """Initialize with the cache name and both versions.

        Args:
            name: Cache name being saved.
            version: Version of the rejected save.
            indexed_version: Highest version already recorded for name.
        """
        super().__init__(
            f"Stale write for cache {name!r}: version {version!r} "
            f"is older than indexed version {indexed_version!r}",
            "STALE_WRITE",
            {"name": name, "version": version, "indexed_version": indexed_version},
        )
