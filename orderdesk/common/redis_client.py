import asyncio
import logging
import ssl
from typing import Optional

from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from .config import settings

_logger = logging.getLogger(__name__)

_redis: Optional[Redis] = None
_lock = asyncio.Lock()


async def get_redis() -> Redis:
    global _redis
    if _redis is None:
        async with _lock:
            if _redis is None:
                conn_kwargs = {
                    "host": settings.REDIS_HOST,
                    "port": settings.REDIS_PORT,
                    "username": settings.REDIS_USERNAME or None,
                    "password": settings.REDIS_PASSWORD or None,
                    "db": settings.REDIS_DB,
                    "decode_responses": True,
                }
                if settings.REDIS_SSL:
                    # relaxed cert verification for local/dev brokers
                    conn_kwargs.update({"ssl": True, "ssl_cert_reqs": ssl.CERT_NONE})
                client = Redis(**conn_kwargs)
                try:
                    await client.ping()
                except Exception as e:
                    _logger.error("Failed to connect to Redis: %s", e)
                    await client.aclose()
                    raise
                _redis = client
                _logger.info(
                    "Connected to Redis at %s:%s (SSL=%s)",
                    settings.REDIS_HOST,
                    settings.REDIS_PORT,
                    settings.REDIS_SSL,
                )
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        try:
            await _redis.aclose()
        finally:
            _redis = None


async def publish_order_message(message: str) -> int:
    """Publish one serialized order event; returns the number of listeners."""
    r = await get_redis()
    return await r.publish(settings.REDIS_ORDER_CHANNEL, message)


async def open_order_subscription() -> PubSub:
    r = await get_redis()
    pubsub = r.pubsub(ignore_subscribe_messages=True)
    await pubsub.subscribe(settings.REDIS_ORDER_CHANNEL)
    return pubsub


async def close_order_subscription(pubsub: Optional[PubSub]) -> None:
    """Release a subscription; errors from a dead connection are only logged."""
    if pubsub is None:
        return
    try:
        try:
            await pubsub.unsubscribe(settings.REDIS_ORDER_CHANNEL)
        finally:
            await pubsub.aclose()
    except Exception as e:
        _logger.debug("Ignoring order subscription close error: %s", e)
