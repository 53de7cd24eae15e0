"""Task and application repository integration tests. Require Postgres; session is rolled back after each test."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import event

from taskdesk.application.dtos.task import TaskCreate
from taskdesk.domain.enums import TaskStatus, TaskType
from taskdesk.infrastructure.exceptions import TaskInsertException
from taskdesk.infrastructure.persistence.models import Application
from taskdesk.infrastructure.persistence.repositories import (
    ApplicationRepository,
    TaskRepository,
)

DAY = datetime(2099, 6, 1, tzinfo=UTC)


async def _application(db_session, tenant_id: str = "tenant-it") -> Application:
    application = Application(tenant_id=tenant_id)
    db_session.add(application)
    await db_session.flush()
    return application


def _create(application: Application, due_at: datetime, task_type=TaskType.CALL) -> TaskCreate:
    return TaskCreate(
        application_id=application.id,
        tenant_id=application.tenant_id,
        type=task_type,
        due_at=due_at,
    )


@pytest.mark.requires_db
async def test_application_get_by_id(db_session) -> None:
    application = await _application(db_session, "tenant-lookup")
    repo = ApplicationRepository(db_session)

    found = await repo.get_by_id(application.id)

    assert found is not None
    assert found.tenant_id == "tenant-lookup"
    assert await repo.get_by_id("does-not-exist") is None


@pytest.mark.requires_db
async def test_create_and_get_task(db_session) -> None:
    application = await _application(db_session)
    repo = TaskRepository(db_session)

    created = await repo.create(_create(application, DAY + timedelta(hours=9), TaskType.EMAIL))

    assert created.id
    assert created.status is TaskStatus.OPEN
    assert created.type is TaskType.EMAIL
    assert created.due_at == DAY + timedelta(hours=9)
    assert created.created_at is not None
    found = await repo.get_by_id(created.id)
    assert found == created


@pytest.mark.requires_db
async def test_create_task_for_missing_application_fails(db_session) -> None:
    repo = TaskRepository(db_session)
    data = TaskCreate(
        application_id="missing-application",
        tenant_id="t",
        type=TaskType.CALL,
        due_at=DAY,
    )
    with pytest.raises(TaskInsertException) as exc_info:
        await repo.create(data)
    assert exc_info.value.details["details"]


@pytest.mark.requires_db
async def test_list_open_due_between_and_mark_completed(db_session) -> None:
    application = await _application(db_session)
    repo = TaskRepository(db_session)
    late = await repo.create(_create(application, DAY + timedelta(hours=17)))
    early = await repo.create(_create(application, DAY + timedelta(hours=8)))
    await repo.create(_create(application, DAY + timedelta(days=1)))
    start, end = DAY, DAY + timedelta(days=1) - timedelta(microseconds=1)

    listed = await repo.list_open_due_between(start, end)
    ours = [t.id for t in listed if t.application_id == application.id]
    assert ours == [early.id, late.id]

    completed = await repo.mark_completed(early.id)
    assert completed is not None
    assert completed.status is TaskStatus.COMPLETED

    listed = await repo.list_open_due_between(start, end)
    assert [t.id for t in listed if t.application_id == application.id] == [late.id]


@pytest.mark.requires_db
async def test_mark_completed_unknown_task(db_session) -> None:
    assert await TaskRepository(db_session).mark_completed("no-such-task") is None


@pytest.mark.requires_db
async def test_create_and_complete_issue_one_statement_each(db_session) -> None:
    """Insert and status update return server timestamps without a follow-up SELECT."""
    application = await _application(db_session)
    repo = TaskRepository(db_session)
    statements: list[str] = []

    def record(conn, cursor, statement, parameters, context, executemany) -> None:
        statements.append(statement.split(None, 1)[0].upper())

    sync_engine = db_session.bind.sync_engine
    event.listen(sync_engine, "before_cursor_execute", record)
    try:
        created = await repo.create(_create(application, DAY + timedelta(hours=9)))
        assert statements == ["INSERT"]
        assert created.created_at is not None
        assert created.updated_at is not None

        task = await repo._get_model(created.id)
        statements.clear()
        task.status = TaskStatus.COMPLETED.value
        await db_session.flush()
        assert statements == ["UPDATE"]
        assert task.updated_at is not None
    finally:
        event.remove(sync_engine, "before_cursor_execute", record)
