"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskdesk.domain.enums import TaskStatus, TaskType
from taskdesk.domain.exceptions import (
    ApplicationNotFoundException,
    AuthenticationException,
    InvalidDueDateException,
    InvalidTaskTypeException,
    MissingFieldsException,
    PastDueDateException,
    ResourceNotFoundException,
    TaskDeskException,
    TaskNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskStatus",
    "TaskType",
    # Exceptions
    "ApplicationNotFoundException",
    "AuthenticationException",
    "InvalidDueDateException",
    "InvalidTaskTypeException",
    "MissingFieldsException",
    "PastDueDateException",
    "ResourceNotFoundException",
    "TaskDeskException",
    "TaskNotFoundException",
    "ValidationException",
]
