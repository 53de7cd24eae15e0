"""DTOs for applications and tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskdesk.domain.enums import TaskStatus, TaskType


@dataclass(frozen=True)
class ApplicationResult:
    """Application a task belongs to. Only the fields the task path reads."""

    id: str
    tenant_id: str


@dataclass(frozen=True)
class TaskCreate:
    """Validated input for a single task insert."""

    application_id: str
    tenant_id: str
    type: TaskType
    due_at: datetime
    status: TaskStatus = TaskStatus.OPEN


@dataclass(frozen=True)
class TaskResult:
    """Persisted task row."""

    id: str
    application_id: str
    tenant_id: str
    type: TaskType
    due_at: datetime
    status: TaskStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class TodayTasks:
    """Open tasks due within one UTC day, ordered by due_at."""

    tasks: list[TaskResult]
    window_start: datetime
    window_end: datetime
