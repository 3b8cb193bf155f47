import logging
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[async_sessionmaker] = None


def init_db(database_url: Optional[str] = None, **engine_kwargs) -> Optional[async_sessionmaker]:
    """Create the engine; without a URL persistence stays disabled."""
    global engine, AsyncSessionLocal
    url = database_url or settings.DATABASE_URL
    if not url:
        logger.info("DATABASE_URL not set, trip requests will not be persisted")
        return None

    engine = create_async_engine(url, future=True, echo=False, **engine_kwargs)
    AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return AsyncSessionLocal


async def create_tables() -> None:
    from app.models.base import Base
    import app.models.trip  # noqa: F401
    import app.models.itinerary  # noqa: F401

    if engine is None:
        return
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
    engine = None
    AsyncSessionLocal = None


def get_sessionmaker() -> Optional[async_sessionmaker]:
    return AsyncSessionLocal


async def ping_db() -> bool:
    if engine is None:
        return False
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True


async def get_db() -> AsyncIterator[Optional[AsyncSession]]:
    """Yields None when persistence is disabled so handlers can degrade."""
    if AsyncSessionLocal is None:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session
