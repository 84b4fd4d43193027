"""Permission decision caching using Redis."""

import json
from datetime import UTC, datetime

import structlog
from redis import Redis

from citeready.crawler.permissions import PermissionDecision

logger = structlog.get_logger(__name__)

# Default cache TTL: 1 hour
DEFAULT_CACHE_TTL_SECONDS = 3600


class PermissionCache:
    """
    Cache for permission decisions keyed by site origin.

    The Redis client and TTL are supplied by the caller, so separate
    resolvers can use separate caches (or none at all).
    """

    def __init__(
        self,
        redis: Redis,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        prefix: str = "permission:cache:",
    ):
        """
        Initialize the cache.

        Args:
            redis: Redis client with decode_responses enabled
            ttl_seconds: Time-to-live for cache entries (default: 1 hour)
            prefix: Key prefix for cache entries
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.redis = redis
        self.ttl_seconds = ttl_seconds
        self._prefix = prefix

    def _cache_key(self, origin: str) -> str:
        """Generate cache key for an origin."""
        return f"{self._prefix}{origin.lower()}"

    async def get(self, origin: str) -> PermissionDecision | None:
        """
        Get a cached decision for an origin.

        Returns:
            PermissionDecision if cached, None on miss or cache error
        """
        try:
            data = self.redis.get(self._cache_key(origin))
            if not data:
                logger.debug("permission_cache_miss", origin=origin)
                return None

            decision = PermissionDecision.from_dict(json.loads(data))
            logger.debug("permission_cache_hit", origin=origin, allowed=decision.allowed)
            return decision

        except Exception as e:
            logger.warning("permission_cache_get_error", origin=origin, error=str(e))
            return None

    async def set(self, origin: str, decision: PermissionDecision) -> bool:
        """
        Store a decision for an origin.

        Returns:
            True if cached successfully, False otherwise
        """
        try:
            payload = decision.to_dict()
            payload["cached_at"] = datetime.now(UTC).isoformat()
            self.redis.setex(self._cache_key(origin), self.ttl_seconds, json.dumps(payload))
            logger.debug("permission_cache_set", origin=origin, ttl_seconds=self.ttl_seconds)
            return True

        except Exception as e:
            logger.warning("permission_cache_set_error", origin=origin, error=str(e))
            return False

    async def invalidate(self, origin: str) -> bool:
        """Drop the cached decision for an origin."""
        try:
            deleted = self.redis.delete(self._cache_key(origin))
            logger.info("permission_cache_invalidated", origin=origin, deleted=bool(deleted))
            return bool(deleted)
        except Exception as e:
            logger.warning("permission_cache_invalidate_error", origin=origin, error=str(e))
            return False
