"""FastAPI application setup."""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
import asyncio
import hashlib
import logging
import time

from api.routes import ai, community, languages, market, resources, sahayak, tools
from api.routes.health import router as health_router
from config.logging_config import setup_logging
from config.settings import settings
from core.dependencies import init_dependencies, shutdown_dependencies

logger = logging.getLogger(__name__)

# Paths that never count against the rate limit
_UNLIMITED_PATHS = ("/health", "/languages", "/resources")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    init_dependencies()
    logger.info("Application started")
    yield
    await shutdown_dependencies()
    logger.info("Application shut down")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Sahayak Portal API",
        description="Multilingual AI services for rural citizens",
        version="1.0.0",
        lifespan=lifespan,
    )

    # -----------------------------------------------------------------------
    # CORS: never combine allow_credentials=True with allow_origins=["*"]
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # In-process per-client limiter (sliding one-minute window).
    # Idle buckets are swept every five minutes.
    # -----------------------------------------------------------------------
    _rate_buckets: dict[str, list[float]] = {}
    _last_sweep = time.time()
    _rate_lock = asyncio.Lock()
    rate_limit = int(settings.RATE_LIMIT_PER_MINUTE)

    @app.middleware("http")
    async def rate_limit_middleware(request: Request, call_next):
        nonlocal _last_sweep

        if request.url.path.startswith(_UNLIMITED_PATHS) or rate_limit <= 0:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        bucket_key = hashlib.sha256(client_ip.encode()).hexdigest()[:16]

        async with _rate_lock:
            now = time.time()
            if now - _last_sweep > 300:
                for key in [k for k, v in _rate_buckets.items() if not v or now - v[-1] > 120]:
                    del _rate_buckets[key]
                _last_sweep = now

            bucket = [t for t in _rate_buckets.get(bucket_key, []) if now - t < 60]
            if len(bucket) >= rate_limit:
                logger.warning(f"Rate limit exceeded for client {bucket_key}")
                return Response(
                    content='{"detail":"Rate limit exceeded. Try again later."}',
                    status_code=429,
                    media_type="application/json",
                )
            bucket.append(now)
            _rate_buckets[bucket_key] = bucket

        return await call_next(request)

    app.include_router(health_router, tags=["Health"])
    app.include_router(languages.router, tags=["Languages"])
    app.include_router(ai.router, prefix="/ai", tags=["AI"])
    app.include_router(sahayak.router, prefix="/sahayak", tags=["Sahayak"])
    app.include_router(tools.router, prefix="/tools", tags=["Tools"])
    app.include_router(market.router, prefix="/market", tags=["Kisan Mandi"])
    app.include_router(community.router, prefix="/community", tags=["Community Help"])
    app.include_router(resources.router, prefix="/resources", tags=["Offline Resources"])

    logger.info("FastAPI application created")
    return app
