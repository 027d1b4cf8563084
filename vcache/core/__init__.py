"""Core: config and constants.

Single place for settings and shared literal values.
"""

from vcache.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
