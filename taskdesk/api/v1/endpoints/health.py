"""Health check endpoints for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from taskdesk.infrastructure.persistence import database
from taskdesk.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 if the database answers SELECT 1; 503 otherwise."""
    database._ensure_engine()
    try:
        async with database.AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(error="Database unreachable").model_dump(),
        )
    return ReadinessResponse()
