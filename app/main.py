from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from app.api import checkout, quotes, tiers
from app.core.config import settings
from app.core.exceptions import CatalogError, FareServiceError
from app.core.logging_setup import setup_logging
from app.core.redis import init_redis, close_redis, get_redis
from app.core.metrics import request_count, request_duration, redis_connected, get_metrics_text
from app.services.catalog import get_catalog
import time
import logging

logger = logging.getLogger(__name__)


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


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    logger.info("Application starting...")

    logger.info("Initializing Redis connection...")
    try:
        await init_redis()
        redis_connected.set(1)
        logger.info("Redis connected")
    except Exception as e:
        logger.error(f"Redis connection failed, quotes will not be cached: {e}")
        redis_connected.set(0)

    try:
        tier_count = len(get_catalog().tiers())
        logger.info(f"Tier catalog loaded ({tier_count} tiers) from {settings.TIER_CATALOG_PATH}")
    except CatalogError as e:
        logger.error(f"Tier catalog unavailable: {e.detail}")

    yield

    logger.info("Application shutting down...")
    await close_redis()
    redis_connected.set(0)
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(tiers.router)
app.include_router(quotes.router)
app.include_router(checkout.router)


@app.exception_handler(FareServiceError)
async def fare_service_error_handler(request: Request, exc: FareServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


def _catalog_ready() -> bool:
    try:
        get_catalog().tiers()
        return True
    except CatalogError:
        return False


@app.get("/health", tags=["monitoring"])
async def health_check():
    redis = get_redis()

    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "dependencies": {
            "redis": "connected" if redis is not None else "disconnected",
            "tier_catalog": "loaded" if _catalog_ready() else "unavailable"
        }
    }


@app.get("/readiness", tags=["monitoring"])
async def readiness_check():
    if not _catalog_ready():
        return JSONResponse(
            status_code=503,
            content={"ready": False, "reason": "Tier catalog not available"}
        )

    return {
        "ready": True,
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
