"""Task API schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskdesk.application.dtos.task import TaskResult
from taskdesk.domain.enums import TaskStatus, TaskType


class CreateTaskRequest(BaseModel):
    """Request body for POST /create-task.

    Fields are optional here so that absent or empty values reach the
    ordered validation in CreateTaskUseCase (reported as missing fields)
    instead of failing request parsing. Non-string values are rejected.
    """

    model_config = ConfigDict(extra="ignore")

    application_id: str | None = Field(default=None, description="Id of an existing application")
    task_type: str | None = Field(default=None, description="One of: call, email, review")
    due_at: str | None = Field(
        default=None,
        description="ISO 8601 timestamp strictly in the future, e.g. 2025-01-01T12:00:00Z",
    )


class TaskResponse(BaseModel):
    """Task record in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    application_id: str
    tenant_id: str
    type: TaskType
    due_at: datetime
    status: TaskStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_result(cls, task: TaskResult) -> TaskResponse:
        return cls.model_validate(task)


class CreateTaskResponse(BaseModel):
    """Response after task creation."""

    success: bool = True
    task_id: str
    task: TaskResponse


class TodayTasksResponse(BaseModel):
    """Open tasks due in the current UTC day, earliest first."""

    tasks: list[TaskResponse]
    window_start: datetime
    window_end: datetime


class ErrorResponse(BaseModel):
    """Error body. Extra keys carry context (required, provided, server_time, ...)."""

    model_config = ConfigDict(extra="allow")

    error: str = Field(..., description="Human-readable error message")
