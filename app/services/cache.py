"""
Lightweight Redis cache helper.

Designed to be optional: if no REDIS_URL is provided, helpers are no-ops so
the app continues to function without Redis.
"""
from __future__ import annotations

import hashlib
import json
import logging
from functools import lru_cache
from typing import Any, Optional

from redis.asyncio import Redis, from_url

from app.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_redis_client() -> Optional[Redis]:
    """Create (or reuse) a Redis client if configured."""
    settings = get_settings()
    if not settings.redis_url:
        logger.info("Redis disabled: no redis_url configured")
        return None

    # Build connection URL (support optional TLS)
    url = settings.redis_url
    if settings.redis_tls and url.startswith("redis://"):
        url = url.replace("redis://", "rediss://", 1)

    client = from_url(url, encoding="utf-8", decode_responses=True)
    return client


def make_cache_key(prefix: str, *parts: str) -> str:
    """Stable key from a prefix and a hash of the given text parts."""
    digest = hashlib.md5("\x1f".join(parts).encode("utf-8")).hexdigest()[:16]
    return f"{prefix}:{digest}"


async def cache_get_json(key: str) -> Optional[Any]:
    client = get_redis_client()
    if not client:
        return None
    try:
        value = await client.get(key)
        if value is None:
            return None
        return json.loads(value)
    except Exception as exc:  # pragma: no cover - best-effort cache
        logger.warning(f"Redis get failed for key={key}: {exc}")
        return None


async def cache_set_json(key: str, value: Any, ttl: int) -> None:
    client = get_redis_client()
    if not client:
        return
    try:
        await client.set(key, json.dumps(value), ex=ttl)
    except Exception as exc:  # pragma: no cover - best-effort cache
        logger.warning(f"Redis set failed for key={key}: {exc}")
