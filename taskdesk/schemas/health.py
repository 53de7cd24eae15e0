"""Liveness and readiness probe bodies."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """GET /api/v1/health: the process is up."""

    status: str = "ok"


class ReadinessResponse(BaseModel):
    """GET /api/v1/health/ready: the database answered SELECT 1."""

    status: str = "ok"


class ReadinessErrorResponse(BaseModel):
    """503 body when the readiness query fails."""

    status: str = "not_ready"
    error: str = Field(..., description="Why the service is not ready")
