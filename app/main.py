from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from app.api import auth, chat, content, distances, expert, itineraries, trips
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.rate_limit import get_client_identifier
from app.core.redis import init_redis, close_redis, get_redis
from app.core.metrics import request_count, request_duration, db_connected, redis_connected, get_metrics_text
from app.db import session as db_session
from app.services.ai_providers import get_provider_config
from app.services.email import email_configured
import time
import uuid
import logging

setup_logging()
logger = logging.getLogger(__name__)

START_TIME = time.time()


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        
        try:
            response = await call_next(request)
            duration = time.time() - start_time
            
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code
            ).inc()
            
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            
            return response
        except Exception:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            raise


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.1f}ms"
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{duration_ms:.1f}ms id={request_id} client={get_client_identifier(request)}"
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")
    
    logger.info("Initializing Redis connection...")
    try:
        redis = await init_redis()
        redis_connected.set(1 if redis is not None else 0)
    except Exception as e:
        logger.error(f"Redis connection failed, continuing with in-memory stores: {e}")
        redis_connected.set(0)
    
    try:
        if db_session.init_db() is not None:
            await db_session.create_tables()
            db_connected.set(1)
            logger.info("Database connected")
        else:
            db_connected.set(0)
    except Exception as e:
        logger.error(f"Database connection failed, quotes will use demo ids: {e}")
        await db_session.close_db()
        db_connected.set(0)

    logger.info(f"AI provider: {get_provider_config().provider}")
    
    yield
    
    logger.info("Application shutting down...")
    await close_redis()
    await db_session.close_db()
    redis_connected.set(0)
    db_connected.set(0)
    logger.info("✓ Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestLoggingMiddleware)
register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(trips.router)
app.include_router(distances.router)
app.include_router(chat.router)
app.include_router(expert.router)
app.include_router(itineraries.router)
app.include_router(content.router)


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check():
    redis = get_redis()
    database = "connected" if db_session.get_sessionmaker() is not None else "disabled"
    
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "environment": settings.ENVIRONMENT,
        "uptime": round(time.time() - START_TIME, 1),
        "dependencies": {
            "redis": "connected" if redis is not None else "disabled",
            "database": database,
            "ai_provider": get_provider_config().provider.value,
            "email": "configured" if email_configured() else "disabled",
        }
    }


@app.get("/readiness", tags=["monitoring"])
async def readiness_check():
    if db_session.get_sessionmaker() is not None:
        try:
            await db_session.ping_db()
        except Exception as e:
            logger.warning(f"Readiness check failed: {e}")
            return JSONResponse(
                status_code=503,
                content={"status": "not_ready", "reason": "Database not reachable"},
            )
    
    return {
        "status": "ready",
        "service": settings.API_TITLE
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }
