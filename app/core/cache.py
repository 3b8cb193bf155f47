"""TTL cache backed by Redis when connected, otherwise by a process-local map"""
import json
import hashlib
import logging
import time
from collections import OrderedDict
from typing import Any, Callable, Optional

from app.core.redis import get_redis
from app.core.metrics import cache_hits, cache_misses

logger = logging.getLogger(__name__)


class MemoryCache:

    def __init__(self, max_size: int = 500, clock: Callable[[], float] = time.monotonic):
        self.max_size = max_size
        self._clock = clock
        self._entries: "OrderedDict[str, tuple[float, Any]]" = OrderedDict()

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return value

    def set(self, key: str, value: Any, ttl: int) -> None:
        if key not in self._entries and len(self._entries) >= self.max_size:
            self._evict_expired()
            while len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
        self._entries[key] = (self._clock() + ttl, value)
        self._entries.move_to_end(key)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_expired(self) -> None:
        now = self._clock()
        for key in [k for k, (expires_at, _) in self._entries.items() if expires_at <= now]:
            del self._entries[key]


memory_cache = MemoryCache()


def make_cache_key(prefix: str, params: dict) -> str:
    params_str = json.dumps(params, sort_keys=True, default=str)
    return f"{prefix}:{hashlib.sha256(params_str.encode()).hexdigest()}"


async def cache_get(key: str) -> Optional[Any]:
    prefix = key.split(":", 1)[0]
    redis = get_redis()

    if redis is not None:
        try:
            cached = await redis.get(key)
            if cached:
                cache_hits.labels(cache_key=prefix).inc()
                return json.loads(cached)
            cache_misses.labels(cache_key=prefix).inc()
            return None
        except Exception as e:
            logger.warning(f"Cache retrieval failed: {e}")

    value = memory_cache.get(key)
    if value is None:
        cache_misses.labels(cache_key=prefix).inc()
    else:
        cache_hits.labels(cache_key=prefix).inc()
    return value


async def cache_set(key: str, value: Any, ttl: int) -> None:
    redis = get_redis()

    if redis is not None:
        try:
            await redis.set(key, json.dumps(value, default=str), ex=ttl)
            return
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")

    memory_cache.set(key, value, ttl)
