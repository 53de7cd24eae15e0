"""In-memory repositories implementing the application protocols for tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

from taskdesk.application.dtos.task import ApplicationResult, TaskCreate, TaskResult
from taskdesk.domain.enums import TaskStatus
from taskdesk.infrastructure.exceptions import TaskInsertException
from taskdesk.shared.utils.generators import generate_cuid

# Fixed server time for tests: 2026-03-10 09:30:00 UTC.
NOW = datetime(2026, 3, 10, 9, 30, 0, tzinfo=UTC)


class InMemoryApplicationRepository:
    """IApplicationRepository over a dict of application_id -> tenant_id."""

    def __init__(self, tenants: dict[str, str] | None = None) -> None:
        self.tenants = dict(tenants or {})
        self.lookups: list[str] = []
        self.fail_with: Exception | None = None

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        self.lookups.append(application_id)
        if self.fail_with is not None:
            raise self.fail_with
        tenant_id = self.tenants.get(application_id)
        if tenant_id is None:
            return None
        return ApplicationResult(id=application_id, tenant_id=tenant_id)


class InMemoryTaskRepository:
    """ITaskRepository keeping rows in insertion order."""

    def __init__(self, now: datetime) -> None:
        self.now = now
        self.rows: dict[str, TaskResult] = {}
        self.insert_error: str | None = None

    def add(self, task: TaskResult) -> TaskResult:
        self.rows[task.id] = task
        return task

    async def create(self, data: TaskCreate) -> TaskResult:
        if self.insert_error is not None:
            raise TaskInsertException(self.insert_error)
        return self.add(
            TaskResult(
                id=generate_cuid(),
                application_id=data.application_id,
                tenant_id=data.tenant_id,
                type=data.type,
                due_at=data.due_at,
                status=data.status,
                created_at=self.now,
                updated_at=self.now,
            )
        )

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        return self.rows.get(task_id)

    async def list_open_due_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        matching = [
            t
            for t in self.rows.values()
            if t.status != TaskStatus.COMPLETED and start <= t.due_at <= end
        ]
        return sorted(matching, key=lambda t: t.due_at)

    async def mark_completed(self, task_id: str) -> TaskResult | None:
        task = self.rows.get(task_id)
        if task is None:
            return None
        updated = replace(task, status=TaskStatus.COMPLETED, updated_at=self.now)
        self.rows[task_id] = updated
        return updated
