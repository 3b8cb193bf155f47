"""
Tests for the fixed-window rate limiter and its HTTP dependency
"""

import pytest
from starlette.requests import Request

from app.core.config import settings
from app.core.rate_limit import (
    FixedWindowRateLimiter,
    RATE_LIMIT_PRESETS,
    RedisRateLimiter,
    get_client_identifier,
    get_limiter,
)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def make_request(headers=None, client=("203.0.113.7", 5000)) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw, "client": client})


class TestFixedWindow:

    def test_allows_up_to_limit_then_denies(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(3, 60, clock=clock, rng=lambda: 1.0)

        results = [limiter.check("ip:1") for _ in range(3)]
        assert all(r.allowed for r in results)
        assert [r.remaining for r in results] == [2, 1, 0]

        denied = limiter.check("ip:1")
        assert denied.allowed is False
        assert denied.count == 4
        assert denied.retry_after == 60

    def test_retry_after_counts_down(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(1, 60, clock=clock, rng=lambda: 1.0)
        limiter.check("ip:1")

        clock.advance(44.5)
        denied = limiter.check("ip:1")
        assert denied.allowed is False
        assert denied.retry_after == 16  # ceil(15.5)

    def test_allows_again_after_window_resets(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(2, 60, clock=clock, rng=lambda: 1.0)
        limiter.check("ip:1")
        limiter.check("ip:1")
        assert limiter.check("ip:1").allowed is False

        clock.advance(60)
        result = limiter.check("ip:1")
        assert result.allowed is True
        assert result.count == 1
        assert result.reset_at == clock.now + 60

    def test_clients_are_counted_separately(self):
        limiter = FixedWindowRateLimiter(1, 60, clock=FakeClock(), rng=lambda: 1.0)
        assert limiter.check("ip:1").allowed
        assert limiter.check("ip:2").allowed
        assert not limiter.check("ip:1").allowed

    def test_probabilistic_cleanup_drops_expired_windows(self):
        clock = FakeClock()
        rolls = iter([1.0, 1.0, 0.0])
        limiter = FixedWindowRateLimiter(5, 10, clock=clock, rng=lambda: next(rolls))
        limiter.check("ip:old")
        limiter.check("ip:other")
        assert len(limiter) == 2

        clock.advance(11)
        limiter.check("ip:new")
        assert len(limiter) == 1

    def test_no_cleanup_when_roll_misses(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(5, 10, clock=clock, rng=lambda: 0.5)
        limiter.check("ip:old")
        clock.advance(11)
        limiter.check("ip:new")
        assert len(limiter) == 2

    def test_reset_single_client(self):
        limiter = FixedWindowRateLimiter(1, 60, clock=FakeClock(), rng=lambda: 1.0)
        limiter.check("ip:1")
        limiter.check("ip:2")
        limiter.reset("ip:1")
        assert limiter.check("ip:1").allowed
        assert not limiter.check("ip:2").allowed


class TestPresets:

    @pytest.mark.parametrize("name,limit,window", [
        ("strict", 50, 900),
        ("normal", 100, 900),
        ("lenient", 200, 900),
        ("burst", 20, 60),
        ("chat", 10, 60),
        ("upload", 5, 60),
        ("expert", 5, 60),
    ])
    def test_preset_values(self, name, limit, window):
        preset = RATE_LIMIT_PRESETS[name]
        assert preset.max_requests == limit
        assert preset.window_seconds == window

    def test_limiter_is_shared_per_preset(self):
        assert get_limiter("chat") is get_limiter("chat")
        assert get_limiter("chat") is not get_limiter("strict")


class TestClientIdentifier:

    def test_bearer_token_is_hashed(self):
        ident = get_client_identifier(make_request({"Authorization": "Bearer secret-token"}))
        assert ident.startswith("user:")
        assert len(ident) == len("user:") + 16
        assert "secret-token" not in ident

    def test_cloudflare_header_wins(self):
        request = make_request({
            "cf-connecting-ip": "198.51.100.1",
            "x-real-ip": "198.51.100.2",
            "x-forwarded-for": "198.51.100.3",
        })
        assert get_client_identifier(request) == "ip:198.51.100.1"

    def test_first_forwarded_for_entry(self):
        request = make_request({"x-forwarded-for": "198.51.100.3, 10.0.0.1"})
        assert get_client_identifier(request) == "ip:198.51.100.3"

    def test_falls_back_to_peer_address(self):
        assert get_client_identifier(make_request()) == "ip:203.0.113.7"

    def test_unknown_without_peer(self):
        assert get_client_identifier(make_request(client=None)) == "ip:unknown"


class FakeRedis:
    def __init__(self):
        self.counts = {}
        self.ttls = {}

    async def incr(self, key):
        self.counts[key] = self.counts.get(key, 0) + 1
        return self.counts[key]

    async def expire(self, key, seconds):
        self.ttls[key] = seconds

    async def ttl(self, key):
        return self.ttls.get(key, -1)


class TestRedisRateLimiter:

    @pytest.mark.asyncio
    async def test_shared_window(self):
        limiter = RedisRateLimiter(FakeRedis(), max_requests=2, window_seconds=60)
        assert (await limiter.check("ip:1")).allowed
        assert (await limiter.check("ip:1")).allowed

        denied = await limiter.check("ip:1")
        assert denied.allowed is False
        assert denied.retry_after == 60
        assert denied.remaining == 0


class TestRateLimitedEndpoints:

    @pytest.mark.asyncio
    async def test_chat_denied_after_preset_limit(self, test_client):
        for _ in range(RATE_LIMIT_PRESETS["chat"].max_requests):
            response = await test_client.post("/api/v1/chat", json={"message": "Bonjour"})
            assert response.status_code == 200

        response = await test_client.post("/api/v1/chat", json={"message": "Bonjour"})
        assert response.status_code == 429
        assert int(response.headers["Retry-After"]) > 0
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "RATE_LIMIT_EXCEEDED"
        assert body["error"]["details"]["retry_after"] > 0

    @pytest.mark.asyncio
    async def test_rate_limit_headers(self, test_client):
        response = await test_client.post("/api/v1/chat", json={"message": "Bonjour"})
        assert response.headers["X-RateLimit-Limit"] == "10"
        assert response.headers["X-RateLimit-Remaining"] == "9"

    @pytest.mark.asyncio
    async def test_disabled_rate_limit(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", False)
        for _ in range(RATE_LIMIT_PRESETS["chat"].max_requests + 2):
            response = await test_client.post("/api/v1/chat", json={"message": "Bonjour"})
            assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_monitoring_endpoints_are_not_limited(self, test_client):
        for endpoint in ["/health", "/readiness", "/metrics"]:
            response = await test_client.get(endpoint)
            assert response.status_code == 200
