"""
Redis Client Module

Synchronous Redis client using redis-py with singleton pattern.
Provides connection pool, health checks, and structured logging.

INFRASTRUCTURE ONLY - No business logic.
"""
import logging
from typing import Optional

import redis

import config

logger = logging.getLogger(__name__)

# Global Redis client instance (singleton)
_redis_client: Optional[redis.Redis] = None
REDIS_READY: bool = False


def get_redis_client() -> Optional[redis.Redis]:
    """
    Get or create Redis client instance (singleton pattern).

    Returns:
        Redis client instance if configured, None if Redis URL not set

    Raises:
        RuntimeError: If Redis URL is invalid
    """
    global _redis_client

    if not config.REDIS_URL:
        return None

    if _redis_client is None:
        try:
            _redis_client = redis.Redis.from_url(
                config.REDIS_URL,
                decode_responses=True,
                socket_timeout=5,
                socket_connect_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30,
                max_connections=10
            )
            logger.info("Redis client created")
        except ValueError as e:
            logger.error(f"Failed to create Redis client: {e}")
            _redis_client = None
            raise RuntimeError(f"Redis client creation failed: {e}") from e

    return _redis_client


def check_redis_connection() -> bool:
    """
    Check Redis connection health.

    Returns:
        True if Redis is connected and responsive, False otherwise

    Does NOT raise - returns False on any Redis error.
    """
    global REDIS_READY

    client = get_redis_client()
    if client is None:
        REDIS_READY = False
        return False

    try:
        REDIS_READY = bool(client.ping())
    except redis.exceptions.RedisError as e:
        REDIS_READY = False
        logger.warning(
            "REDIS_CONNECTION_FAILED",
            extra={
                "component": "infra",
                "operation": "redis_health_check",
                "outcome": "failed",
                "reason": str(e)[:100]
            }
        )
        return False

    if REDIS_READY:
        logger.info(
            "REDIS_CONNECTED",
            extra={
                "component": "infra",
                "operation": "redis_health_check",
                "outcome": "success"
            }
        )
    else:
        logger.warning(
            "REDIS_CONNECTION_FAILED",
            extra={
                "component": "infra",
                "operation": "redis_health_check",
                "outcome": "failed",
                "reason": "ping_returned_false"
            }
        )
    return REDIS_READY


def close_redis_client():
    """
    Close Redis client connection pool.

    Safe to call multiple times - idempotent.
    """
    global _redis_client, REDIS_READY

    if _redis_client is not None:
        try:
            _redis_client.close()
            logger.info("Redis client closed")
        except redis.exceptions.RedisError as e:
            logger.error(f"Error closing Redis client: {e}")
        finally:
            _redis_client = None
            REDIS_READY = False
