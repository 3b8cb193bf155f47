import pytest
from app.core import cache
from app.core.cache import MemoryCache, cache_get, cache_set, make_cache_key


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_entries_expire():
    clock = FakeClock()
    store = MemoryCache(clock=clock)
    store.set("route:a", {"distance": 15}, ttl=10)
    assert store.get("route:a") == {"distance": 15}
    clock.now += 10
    assert store.get("route:a") is None
    assert len(store) == 0


def test_oldest_entry_is_evicted():
    store = MemoryCache(max_size=2, clock=FakeClock())
    store.set("a", 1, ttl=60)
    store.set("b", 2, ttl=60)
    store.get("a")
    store.set("c", 3, ttl=60)
    assert store.get("b") is None
    assert store.get("a") == 1
    assert store.get("c") == 3


def test_cache_key_ignores_param_order():
    k1 = make_cache_key("route", {"departure": "dakar", "destination": "thies"})
    k2 = make_cache_key("route", {"destination": "thies", "departure": "dakar"})
    assert k1 == k2
    assert k1.startswith("route:")


class FailingRedis:
    async def get(self, key):
        raise ConnectionError("redis gone")

    async def set(self, key, value, ex=None):
        raise ConnectionError("redis gone")


@pytest.mark.asyncio
async def test_memory_fallback_flow():
    key = make_cache_key("route", {"departure": "mbour"})
    assert await cache_get(key) is None
    await cache_set(key, {"distance": 30}, ttl=60)
    assert await cache_get(key) == {"distance": 30}


@pytest.mark.asyncio
async def test_redis_errors_fall_back_to_memory(monkeypatch):
    monkeypatch.setattr(cache, "get_redis", lambda: FailingRedis())
    key = make_cache_key("route", {"departure": "saly"})
    await cache_set(key, {"distance": 12}, ttl=60)
    assert await cache_get(key) == {"distance": 12}
