"""Tests for the dashboard task API (today listing, completion)."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient

from taskdesk.application.dtos.task import TaskResult
from taskdesk.domain.enums import TaskStatus, TaskType
from taskdesk.shared.utils.datetime import parse_iso_datetime
from tests.fakes import InMemoryTaskRepository

DAY = datetime(2026, 3, 10, tzinfo=UTC)


def _seed(repo: InMemoryTaskRepository, task_id: str, due_at: datetime, status=TaskStatus.OPEN) -> None:
    repo.add(
        TaskResult(
            id=task_id,
            application_id="A1",
            tenant_id="T1",
            type=TaskType.REVIEW,
            due_at=due_at,
            status=status,
        )
    )


async def test_today_lists_open_tasks_in_order(
    client: AsyncClient, task_repo: InMemoryTaskRepository
) -> None:
    _seed(task_repo, "b", DAY + timedelta(hours=15))
    _seed(task_repo, "a", DAY + timedelta(hours=11))
    _seed(task_repo, "done", DAY + timedelta(hours=12), TaskStatus.COMPLETED)
    _seed(task_repo, "next-day", DAY + timedelta(days=1, hours=1))

    response = await client.get("/api/v1/tasks/today")

    assert response.status_code == 200
    data = response.json()
    assert [t["id"] for t in data["tasks"]] == ["a", "b"]
    assert parse_iso_datetime(data["window_start"]) == DAY
    assert parse_iso_datetime(data["window_end"]) < DAY + timedelta(days=1)


async def test_today_empty(client: AsyncClient) -> None:
    response = await client.get("/api/v1/tasks/today")
    assert response.status_code == 200
    assert response.json()["tasks"] == []


async def test_complete_task(client: AsyncClient, task_repo: InMemoryTaskRepository) -> None:
    _seed(task_repo, "t1", DAY + timedelta(hours=11))

    response = await client.post("/api/v1/tasks/t1/complete")

    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    listing = await client.get("/api/v1/tasks/today")
    assert listing.json()["tasks"] == []


async def test_complete_task_twice_is_idempotent(
    client: AsyncClient, task_repo: InMemoryTaskRepository
) -> None:
    _seed(task_repo, "t1", DAY + timedelta(hours=11))
    first = await client.post("/api/v1/tasks/t1/complete")
    second = await client.post("/api/v1/tasks/t1/complete")
    assert second.status_code == 200
    assert second.json() == first.json()


async def test_complete_unknown_task_is_404(client: AsyncClient) -> None:
    response = await client.post("/api/v1/tasks/nope/complete")
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found", "task_id": "nope"}
