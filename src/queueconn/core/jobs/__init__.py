"""Task-queue client configuration built from resolved descriptors."""

from queueconn.core.jobs.utils import get_redis_settings, to_redis_settings


__all__ = [
    "get_redis_settings",
    "to_redis_settings",
]
