"""
Redis Cache Service

Provides caching for routing oracle responses so repeated requests for the
same origin/destination pair (e.g. while a user drags preference sliders)
do not hit OSRM again.

Uses Redis for fast in-memory storage with automatic expiration (TTL).
Fails gracefully if Redis is unavailable (returns None, logs warning).
"""
import json
import logging
from typing import Any, Optional

import redis

logger = logging.getLogger(__name__)

# Redis connection (lazy initialization)
_redis_client: Optional[redis.Redis] = None


def get_redis_client() -> Optional[redis.Redis]:
    """
    Get Redis client connection (singleton pattern).
    Uses the cache Redis URL from settings.

    Returns:
        Redis client if connection successful, None if Redis unavailable
    """
    global _redis_client

    if _redis_client is None:
        try:
            # Import settings here to avoid circular imports
            from quietroute.config import settings

            client = redis.Redis.from_url(
                settings.cache_redis_url,
                decode_responses=True,  # Return strings instead of bytes
                socket_connect_timeout=2,  # Fail fast if Redis is down
                socket_timeout=2,
            )
            client.ping()
            _redis_client = client
            logger.info("Redis connection established")
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(f"Redis unavailable, caching disabled: {e}")
            _redis_client = None

    return _redis_client


def cache_get(key: str) -> Optional[Any]:
    """
    Get value from cache.

    Args:
        key: Cache key

    Returns:
        Cached value (deserialized from JSON), or None if not found or Redis unavailable
    """
    client = get_redis_client()
    if client is None:
        return None

    try:
        cached = client.get(key)
        if cached:
            logger.debug(f"Cache HIT: {key}")
            return json.loads(cached)
        else:
            logger.debug(f"Cache MISS: {key}")
            return None
    except (redis.RedisError, json.JSONDecodeError) as e:
        logger.error(f"Cache get error for key '{key}': {e}")
        return None


def cache_set(key: str, value: Any, ttl_seconds: int = 3600) -> bool:
    """
    Set value in cache with expiration.

    Args:
        key: Cache key
        value: Value to cache (will be JSON serialized)
        ttl_seconds: Time to live in seconds (default: 1 hour)

    Returns:
        True if cached successfully, False if Redis unavailable or error
    """
    client = get_redis_client()
    if client is None:
        return False

    try:
        serialized = json.dumps(value)
        client.setex(key, ttl_seconds, serialized)
        logger.debug(f"Cache SET: {key} (TTL: {ttl_seconds}s)")
        return True
    except (redis.RedisError, TypeError, ValueError) as e:
        logger.error(f"Cache set error for key '{key}': {e}")
        return False


# Cache key builders

def build_route_key(
    origin_lat: float,
    origin_lon: float,
    destination_lat: float,
    destination_lon: float,
    profile: str,
    alternatives: int,
) -> str:
    """
    Build cache key for an oracle route response.

    Coordinates are rounded to 5 decimals (~1m) so that the same pin dropped
    twice maps to the same entry.

    Example:
        >>> build_route_key(22.572612, 88.363912, 22.58, 88.37, "foot", 3)
        'osrm:route:foot:3:22.57261:88.36391:22.58:88.37'
    """
    return (
        f"osrm:route:{profile}:{alternatives}:"
        f"{round(origin_lat, 5)}:{round(origin_lon, 5)}:"
        f"{round(destination_lat, 5)}:{round(destination_lon, 5)}"
    )
