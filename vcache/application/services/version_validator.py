"""Version string checks for cache versions.

Versions are MAJOR.MINOR.PATCH strings. Validation uses search, not
fullmatch: "v1.2.3-beta" is accepted because it contains 1.2.3.
Ordering is plain string ordering, so "10.0.0" sorts before "9.0.0".
"""

import re
from typing import Any

from vcache.core.constants import VERSION_PATTERN

_VERSION_RE = re.compile(VERSION_PATTERN)
_TRAILING_VERSION_RE = re.compile(rf"({VERSION_PATTERN})$")


class VersionValidator:
    """Stateless helpers for cache version strings."""

    @staticmethod
    def is_valid_version(value: Any) -> bool:
        """Return True if value contains a MAJOR.MINOR.PATCH group."""
        if not isinstance(value, str):
            return False
        return _VERSION_RE.search(value) is not None

    @staticmethod
    def is_newer_version(candidate: str, current: str) -> bool:
        """Return True if candidate sorts after current (string comparison)."""
        return candidate > current

    @staticmethod
    def extract_version(text: str) -> str | None:
        """Return the trailing MAJOR.MINOR.PATCH of a stored key, or None."""
        match = _TRAILING_VERSION_RE.search(text)
        return match.group(1) if match else None
