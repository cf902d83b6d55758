"""Application factory for the Daybook API."""

import secrets
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from urllib.parse import urlparse

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.daybook.api import health
from src.daybook.api.middlewares import logging_context_middleware
from src.daybook.api.v1.router import api_router
from src.daybook.core.config import Settings, get_settings
from src.daybook.core.db import dispose_engine
from src.daybook.core.exceptions import setup_exception_handlers
from src.daybook.core.logging import get_logger, setup_logging
from src.daybook.core.rate_limit import limiter
from src.daybook.core.storage import close_object_store

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "projects", "description": "Projects, their day entries and progress"},
    {"name": "comments", "description": "Comment threads on entries"},
    {"name": "profiles", "description": "Display names and bios"},
    {"name": "health", "description": "Service health"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", storage_backend=settings.storage_backend)

    yield

    logger.info("Closing connections...")
    await close_object_store()
    await dispose_engine()
    logger.info("Shutdown complete")


def _expose_metrics(app: FastAPI, settings: Settings) -> None:
    """Instrument the app and serve /metrics, behind X-Metrics-Key when configured."""
    instrumentator = Instrumentator().instrument(app)
    expected_key = settings.metrics_api_key
    if not expected_key:
        instrumentator.expose(app, endpoint="/metrics")
        return

    key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])


def _mount_local_images(app: FastAPI, settings: Settings) -> None:
    """Serve locally stored images at the path of ``storage_public_url``."""
    mount_path = urlparse(settings.storage_public_url).path.rstrip("/") or "/uploads"
    directory = Path(settings.storage_local_dir)
    directory.mkdir(parents=True, exist_ok=True)
    app.mount(mount_path, StaticFiles(directory=directory), name="images")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Day-by-day journals for short personal projects",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter
    app.add_exception_handler(
        RateLimitExceeded,
        _rate_limit_exceeded_handler,  # type: ignore[arg-type]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    app.middleware("http")(logging_context_middleware)
    # Added last so it is the outermost middleware and sets the id first
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)
    app.include_router(health.router)
    _expose_metrics(app, settings)

    if settings.storage_backend == "local" and not settings.is_testing:
        _mount_local_images(app, settings)

    return app


app = create_app()
