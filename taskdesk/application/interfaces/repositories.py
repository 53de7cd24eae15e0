"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskdesk.application.dtos.task import ApplicationResult, TaskCreate, TaskResult


class IApplicationRepository(Protocol):
    """Protocol for application lookups (read-only)."""

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        """Return application by ID, or None when it does not exist."""


class ITaskRepository(Protocol):
    """Protocol for task persistence."""

    async def create(self, data: TaskCreate) -> TaskResult:
        """Insert one task row and return it with server-generated fields.

        Raises TaskInsertException on any persistence failure.
        """

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID, or None."""

    async def list_open_due_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return tasks not completed with start <= due_at <= end, ordered by due_at ascending."""

    async def mark_completed(self, task_id: str) -> TaskResult | None:
        """Set status to completed. Return the updated task, or None if not found."""
