import logging
from typing import Optional
from redis.asyncio import Redis
from app.core.config import settings

logger = logging.getLogger(__name__)

redis: Optional[Redis] = None

async def init_redis() -> Optional[Redis]:
    """Connect the shared store; stays None when REDIS_URL is not configured."""
    global redis
    if not settings.REDIS_URL:
        logger.info("REDIS_URL not set, using in-memory rate limits and cache")
        return None
    try:
        client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
        await client.ping()
        redis = client
        logger.info("Connected to Redis")
        return redis
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        raise

async def close_redis():
    global redis
    if redis:
        await redis.aclose()
        redis = None

def get_redis() -> Optional[Redis]:
    return redis
