"""Liveness and readiness of the database and image storage."""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.daybook.core.config import get_settings
from src.daybook.core.db import STORAGE_ERRORS, get_session
from src.daybook.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> JSONResponse:
    """Report database reachability; 503 when the database cannot be queried."""
    checks: dict[str, Any] = {"status": "healthy", "database": "unknown"}

    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
        checks["database"] = "healthy"
    except STORAGE_ERRORS as e:
        logger.warning("Health check failed", error=str(e))
        checks["database"] = "unhealthy"
        checks["status"] = "unhealthy"

    checks["image_storage"] = get_settings().storage_backend
    return JSONResponse(content=checks, status_code=200 if checks["status"] == "healthy" else 503)
