"""Task repository: insert, lookup, today listing, completion."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.application.dtos.task import TaskCreate, TaskResult
from taskdesk.domain.enums import TaskStatus, TaskType
from taskdesk.infrastructure.exceptions import TaskInsertException, TaskUpdateException
from taskdesk.infrastructure.persistence.models.task import Task
from taskdesk.infrastructure.persistence.repositories.base import BaseRepository
from taskdesk.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        application_id=t.application_id,
        tenant_id=t.tenant_id,
        type=TaskType(t.type),
        due_at=ensure_utc(t.due_at),
        status=TaskStatus(t.status),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _error_reason(exc: SQLAlchemyError) -> str:
    """Driver message without the SQL statement and parameters."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create(self, data: TaskCreate) -> TaskResult:
        """Insert a task and return the result DTO.

        Raises:
            TaskInsertException: On any SQLAlchemy error (FK/check violation, connection loss).
        """
        task = Task(
            application_id=data.application_id,
            tenant_id=data.tenant_id,
            type=data.type.value,
            due_at=ensure_utc(data.due_at),
            status=data.status.value,
        )
        try:
            await self._add(task)
        except SQLAlchemyError as e:
            logger.exception("Insert error for application %s", data.application_id)
            raise TaskInsertException(_error_reason(e)) from e
        return _to_result(task)

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID, or None."""
        task = await self._get_model(task_id)
        return _to_result(task) if task else None

    async def list_open_due_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return not-completed tasks with start <= due_at <= end, earliest first."""
        stmt = (
            select(Task)
            .where(
                Task.status != TaskStatus.COMPLETED.value,
                Task.due_at >= ensure_utc(start),
                Task.due_at <= ensure_utc(end),
            )
            .order_by(Task.due_at.asc(), Task.id.asc())
        )
        result = await self.db.execute(stmt)
        return [_to_result(t) for t in result.scalars().all()]

    async def mark_completed(self, task_id: str) -> TaskResult | None:
        """Set status to completed; return the updated task or None if no row matched."""
        task = await self._get_model(task_id)
        if task is None:
            return None
        task.status = TaskStatus.COMPLETED.value
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.exception("Update error for task %s", task_id)
            raise TaskUpdateException(task_id, _error_reason(e)) from e
        return _to_result(task)
