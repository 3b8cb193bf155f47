"""Fixed-window rate limiting keyed by client identifier"""
import hashlib
import logging
import math
import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fastapi import Request, Response

from app.core.config import settings
from app.core.errors import RateLimitError
from app.core.metrics import rate_limit_exceeded
from app.core.redis import get_redis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitPreset:
    max_requests: int
    window_seconds: int


RATE_LIMIT_PRESETS: Dict[str, RateLimitPreset] = {
    "strict": RateLimitPreset(50, 15 * 60),
    "normal": RateLimitPreset(100, 15 * 60),
    "lenient": RateLimitPreset(200, 15 * 60),
    "burst": RateLimitPreset(20, 60),
    "chat": RateLimitPreset(10, 60),
    "upload": RateLimitPreset(5, 60),
    "expert": RateLimitPreset(5, 60),
}


@dataclass
class RateLimitResult:
    allowed: bool
    count: int
    limit: int
    reset_at: float
    retry_after: int
    remaining: int


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Process-local counters; lost on restart and not shared across instances."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.time,
        cleanup_probability: float = 0.01,
        rng: Callable[[], float] = random.random,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.cleanup_probability = cleanup_probability
        self._clock = clock
        self._rng = rng
        self._windows: Dict[str, _Window] = {}

    def check(self, client_id: str) -> RateLimitResult:
        now = self._clock()
        self._maybe_cleanup(now)

        window = self._windows.get(client_id)
        if window is None or window.reset_at <= now:
            window = _Window(count=1, reset_at=now + self.window_seconds)
            self._windows[client_id] = window
            logger.debug(f"Rate limit: new window for {client_id}")
            return RateLimitResult(
                allowed=True,
                count=1,
                limit=self.max_requests,
                reset_at=window.reset_at,
                retry_after=0,
                remaining=self.max_requests - 1,
            )

        window.count += 1
        allowed = window.count <= self.max_requests
        retry_after = 0 if allowed else math.ceil(window.reset_at - now)

        if not allowed:
            logger.warning(
                f"Rate limit exceeded for {client_id}: {window.count}/{self.max_requests}, "
                f"retry after {retry_after}s"
            )

        return RateLimitResult(
            allowed=allowed,
            count=window.count,
            limit=self.max_requests,
            reset_at=window.reset_at,
            retry_after=retry_after,
            remaining=max(0, self.max_requests - window.count),
        )

    def reset(self, client_id: Optional[str] = None) -> None:
        if client_id is None:
            self._windows.clear()
        else:
            self._windows.pop(client_id, None)

    def __len__(self) -> int:
        return len(self._windows)

    def _maybe_cleanup(self, now: float) -> None:
        if self._rng() >= self.cleanup_probability:
            return
        expired = [key for key, w in self._windows.items() if w.reset_at <= now]
        for key in expired:
            del self._windows[key]
        if expired:
            logger.debug(f"Rate limit store cleanup: removed {len(expired)}, kept {len(self._windows)}")


class RedisRateLimiter:
    """Same fixed-window contract, shared through Redis INCR/EXPIRE."""

    def __init__(self, redis, max_requests: int, window_seconds: int, prefix: str = "rl"):
        self.redis = redis
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.prefix = prefix

    async def check(self, client_id: str) -> RateLimitResult:
        key = f"{self.prefix}:{client_id}"
        count = await self.redis.incr(key)
        if count == 1:
            await self.redis.expire(key, self.window_seconds)
        ttl = await self.redis.ttl(key)
        if ttl is None or ttl < 0:
            await self.redis.expire(key, self.window_seconds)
            ttl = self.window_seconds

        allowed = count <= self.max_requests
        return RateLimitResult(
            allowed=allowed,
            count=count,
            limit=self.max_requests,
            reset_at=time.time() + ttl,
            retry_after=0 if allowed else int(ttl),
            remaining=max(0, self.max_requests - count),
        )


_limiters: Dict[str, FixedWindowRateLimiter] = {}


def get_limiter(preset: str) -> FixedWindowRateLimiter:
    limiter = _limiters.get(preset)
    if limiter is None:
        config = RATE_LIMIT_PRESETS[preset]
        limiter = FixedWindowRateLimiter(config.max_requests, config.window_seconds)
        _limiters[preset] = limiter
    return limiter


def reset_limiters() -> None:
    _limiters.clear()


def _hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()[:16]


def get_client_identifier(request: Request) -> str:
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header[len("Bearer "):].strip()
        if token:
            return f"user:{_hash_token(token)}"

    forwarded_for = request.headers.get("x-forwarded-for")
    ip = (
        request.headers.get("cf-connecting-ip")
        or request.headers.get("x-real-ip")
        or (forwarded_for.split(",")[0] if forwarded_for else None)
        or (request.client.host if request.client else None)
        or "unknown"
    )
    return f"ip:{ip.strip()}"


async def check_rate_limit(request: Request, preset: str = "normal") -> RateLimitResult:
    client_id = get_client_identifier(request)
    redis = get_redis()

    if redis is not None:
        config = RATE_LIMIT_PRESETS[preset]
        try:
            limiter = RedisRateLimiter(redis, config.max_requests, config.window_seconds, prefix=f"rl:{preset}")
            result = await limiter.check(client_id)
        except Exception as e:
            logger.warning(f"Redis rate limit failed, using in-memory window: {e}")
            result = get_limiter(preset).check(client_id)
    else:
        result = get_limiter(preset).check(client_id)

    if not result.allowed:
        rate_limit_exceeded.labels(preset=preset).inc()
        raise RateLimitError(retry_after=result.retry_after)
    return result


def rate_limit(preset: str = "normal"):
    """FastAPI dependency enforcing a named preset."""
    if preset not in RATE_LIMIT_PRESETS:
        raise ValueError(f"Unknown rate limit preset: {preset}")

    async def dependency(request: Request, response: Response) -> None:
        if not settings.RATE_LIMIT_ENABLED:
            return
        result = await check_rate_limit(request, preset)
        response.headers["X-RateLimit-Limit"] = str(result.limit)
        response.headers["X-RateLimit-Remaining"] = str(result.remaining)

    return dependency
