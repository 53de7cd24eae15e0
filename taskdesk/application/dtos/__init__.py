"""Application DTOs (no ORM dependency)."""

from taskdesk.application.dtos.task import (
    ApplicationResult,
    TaskCreate,
    TaskResult,
    TodayTasks,
)

__all__ = [
    "ApplicationResult",
    "TaskCreate",
    "TaskResult",
    "TodayTasks",
]
