"""Read-through Redis cache in front of a market data source.

Market data is cached per location with an explicit TTL. Redis problems are
logged and the source is called directly; the cache never fails a lookup.
"""

import hashlib
import json
import logging

import redis.asyncio as redis

from src.config import settings
from src.data.base import MarketDataSource
from src.models.borrower import Location
from src.models.market import MarketData

logger = logging.getLogger(__name__)

_redis_client: redis.Redis | None = None


async def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(settings.redis_url, decode_responses=True)
    return _redis_client


def _cache_key(location: Location) -> str:
    """Deterministic key for a location, case and whitespace insensitive."""
    raw = json.dumps(
        {
            "city": location.city.strip().lower(),
            "state": location.state.strip().upper(),
            "zip": location.zip_code.strip(),
        },
        sort_keys=True,
    )
    h = hashlib.sha256(raw.encode()).hexdigest()[:16]
    return f"affordability:market:{h}"


class MarketDataCache:
    """Wraps a MarketDataSource; same interface, cached results."""

    def __init__(
        self,
        source: MarketDataSource,
        client: redis.Redis | None = None,
        ttl_seconds: int | None = None,
    ):
        self.source = source
        self._client = client
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.market_data_ttl_seconds

    async def _redis(self) -> redis.Redis:
        if self._client is None:
            self._client = await get_redis()
        return self._client

    async def get_market_data(self, location: Location) -> MarketData | None:
        key = _cache_key(location)
        try:
            r = await self._redis()
            cached_value = await r.get(key)
            if cached_value is not None:
                logger.debug("Cache hit: %s", key)
                return MarketData.from_dict(json.loads(cached_value))
        except Exception:
            logger.warning("Redis unavailable, skipping cache for %s", key)

        result = await self.source.get_market_data(location)
        if result is None:
            return None

        try:
            r = await self._redis()
            await r.setex(key, self.ttl_seconds, json.dumps(result.to_dict()))
        except Exception:
            logger.warning("Failed to write cache for %s", key)

        return result

    async def invalidate(self, location: Location) -> None:
        try:
            r = await self._redis()
            await r.delete(_cache_key(location))
        except Exception:
            logger.warning("Failed to invalidate cache for %s", _cache_key(location))
