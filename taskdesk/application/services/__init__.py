"""Application services: request validation."""

from taskdesk.application.services.task_request_validator import (
    ValidatedTaskRequest,
    validate_create_task_request,
)

__all__ = [
    "ValidatedTaskRequest",
    "validate_create_task_request",
]
