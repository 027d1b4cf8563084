"""Redis client construction shared by the key-value and settings stores."""

from __future__ import annotations

import redis

from vcache.core.config import Settings, get_settings


def build_redis_client(settings: Settings | None = None) -> redis.Redis:
    """Create a blocking Redis client from settings (string responses).

    Args:
        settings: Optional Settings; defaults to get_settings().

    Returns:
        Unconnected redis.Redis; the first command opens the connection.
    """
    settings = settings or get_settings()
    return redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password.get_secret_value() if settings.redis_password else None,
        decode_responses=True,
        socket_connect_timeout=settings.redis_socket_timeout,
        socket_timeout=settings.redis_socket_timeout,
        socket_keepalive=True,
    )
