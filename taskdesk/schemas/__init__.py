"""API request/response schemas (Pydantic)."""

from taskdesk.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from taskdesk.schemas.task import (
    CreateTaskRequest,
    CreateTaskResponse,
    ErrorResponse,
    TaskResponse,
    TodayTasksResponse,
)

__all__ = [
    "CreateTaskRequest",
    "CreateTaskResponse",
    "ErrorResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "TaskResponse",
    "TodayTasksResponse",
]
