"""Cache: Redis service for the settings blob.

CacheService uses app.core.config; connect() at startup, disconnect() at shutdown.
"""

from app.infrastructure.cache.redis_cache import CacheService

__all__ = ["CacheService"]
