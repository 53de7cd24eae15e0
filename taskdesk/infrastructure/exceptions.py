"""Infrastructure exceptions for data store operations.

Storage errors extend TaskDeskException so presentation can map them
to HTTP responses consistently.
"""

from taskdesk.domain.exceptions import TaskDeskException


class StorageException(TaskDeskException):
    """Base exception for data store operations."""


class TaskInsertException(StorageException):
    """Task insert failed (constraint violation, connection loss, ...)."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Failed to create task",
            "INSERT_FAILED",
            {"details": reason},
        )


class TaskUpdateException(StorageException):
    """Task status update failed."""

    def __init__(self, task_id: str, reason: str) -> None:
        super().__init__(
            "Failed to update task",
            "UPDATE_FAILED",
            {"task_id": task_id, "details": reason},
        )
