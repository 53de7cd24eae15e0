"""Tests for POST /create-task (status codes, error bodies, CORS, side effects)."""

from httpx import AsyncClient

from taskdesk.shared.utils.datetime import parse_iso_datetime
from tests.fakes import NOW
from tests.fakes import InMemoryApplicationRepository, InMemoryTaskRepository

FUTURE = "2026-03-11T10:00:00Z"
CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "authorization, x-client-info, apikey, content-type",
}


def _assert_cors(response) -> None:
    for name, value in CORS.items():
        assert response.headers.get(name) == value


async def test_create_task_success(client: AsyncClient, task_repo: InMemoryTaskRepository) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": FUTURE},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    task = data["task"]
    assert data["task_id"] == task["id"]
    assert task["application_id"] == "A1"
    assert task["tenant_id"] == "T1"
    assert task["type"] == "call"
    assert task["status"] == "open"
    assert parse_iso_datetime(task["due_at"]) == parse_iso_datetime(FUTURE)
    assert list(task_repo.rows) == [task["id"]]
    _assert_cors(response)


async def test_create_task_ignores_unknown_fields(client: AsyncClient) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "review", "due_at": FUTURE, "note": "x"},
    )
    assert response.status_code == 200


async def test_duplicate_requests_create_two_tasks(
    client: AsyncClient, task_repo: InMemoryTaskRepository
) -> None:
    body = {"application_id": "A2", "task_type": "email", "due_at": FUTURE}
    first = await client.post("/create-task", json=body)
    second = await client.post("/create-task", json=body)
    assert first.json()["task_id"] != second.json()["task_id"]
    assert len(task_repo.rows) == 2


async def test_missing_fields(client: AsyncClient, task_repo: InMemoryTaskRepository) -> None:
    response = await client.post("/create-task", json={"application_id": "A1"})
    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields",
        "required": ["application_id", "task_type", "due_at"],
        "missing": ["task_type", "due_at"],
    }
    assert task_repo.rows == {}
    _assert_cors(response)


async def test_empty_body_reports_all_fields_missing(client: AsyncClient) -> None:
    response = await client.post("/create-task")
    assert response.status_code == 400
    assert response.json()["missing"] == ["application_id", "task_type", "due_at"]


async def test_invalid_task_type(
    client: AsyncClient, application_repo: InMemoryApplicationRepository
) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "fax", "due_at": FUTURE},
    )
    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid task_type. Must be one of: call, email, review",
        "allowed": ["call", "email", "review"],
        "provided": "fax",
    }
    assert application_repo.lookups == []


async def test_invalid_due_at(client: AsyncClient) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": "next tuesday"},
    )
    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid date format for due_at",
        "hint": "Use ISO 8601 format like 2025-01-01T12:00:00Z",
        "provided": "next tuesday",
    }


async def test_past_due_at(client: AsyncClient) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": "2020-01-01T00:00:00Z"},
    )
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "due_at must be a future timestamp"
    assert data["provided"] == "2020-01-01T00:00:00Z"
    assert parse_iso_datetime(data["server_time"]) == NOW


async def test_unknown_application(
    client: AsyncClient, task_repo: InMemoryTaskRepository
) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A404", "task_type": "call", "due_at": FUTURE},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Application not found", "application_id": "A404"}
    assert task_repo.rows == {}
    _assert_cors(response)


async def test_application_lookup_error_is_404(
    client: AsyncClient, application_repo: InMemoryApplicationRepository
) -> None:
    application_repo.fail_with = TimeoutError("lookup timed out")
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": FUTURE},
    )
    assert response.status_code == 404


async def test_insert_failure_is_500_with_cause(
    client: AsyncClient, task_repo: InMemoryTaskRepository
) -> None:
    task_repo.insert_error = "connection to server was lost"
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": FUTURE},
    )
    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to create task",
        "details": "connection to server was lost",
    }
    _assert_cors(response)


async def test_malformed_json_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/create-task",
        content=b'{"application_id": "A1",',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
    _assert_cors(response)


async def test_non_string_field_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": 3, "due_at": FUTURE},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


async def test_other_methods_are_405(client: AsyncClient) -> None:
    for method in ("GET", "PUT", "DELETE", "PATCH"):
        response = await client.request(method, "/create-task")
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        _assert_cors(response)


async def test_options_preflight(client: AsyncClient, task_repo: InMemoryTaskRepository) -> None:
    response = await client.options("/create-task")
    assert response.status_code == 200
    assert response.content == b""
    _assert_cors(response)
    assert task_repo.rows == {}


async def test_due_at_at_edges_of_datetime_range_is_400(
    client: AsyncClient, task_repo: InMemoryTaskRepository
) -> None:
    past = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": "0001-01-01T00:00:00+05:00"},
    )
    assert past.status_code == 400
    assert past.json()["error"] == "due_at must be a future timestamp"

    beyond = await client.post(
        "/create-task",
        json={"application_id": "A1", "task_type": "call", "due_at": "9999-12-31T23:00:00-05:00"},
    )
    assert beyond.status_code == 400
    assert beyond.json()["error"] == "Invalid date format for due_at"
    assert task_repo.rows == {}
