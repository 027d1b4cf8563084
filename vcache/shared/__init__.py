"""Shared utilities: telemetry and cross-cutting helpers. No business logic."""

from vcache.shared.telemetry import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
