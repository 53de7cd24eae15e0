"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, and use cases.
Routes depend only on these; tests replace them via app.dependency_overrides
(e.g. in-memory repositories and a fixed clock).
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import datetime
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.application.interfaces.repositories import (
    IApplicationRepository,
    ITaskRepository,
)
from taskdesk.application.use_cases.tasks import (
    CompleteTaskUseCase,
    CreateTaskUseCase,
    ListTodayTasksUseCase,
)
from taskdesk.core.config import get_settings
from taskdesk.domain.exceptions import AuthenticationException
from taskdesk.infrastructure.persistence.database import get_db, get_db_transactional
from taskdesk.infrastructure.persistence.repositories import (
    ApplicationRepository,
    TaskRepository,
)
from taskdesk.shared.utils.datetime import utc_now

_bearer = HTTPBearer(auto_error=False)


async def require_api_key(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> None:
    """Check Authorization: Bearer <API_KEY> when API_KEY is configured.

    When API_KEY is unset, the hosting platform is expected to enforce the key.
    """
    expected = get_settings().api_key_value
    if expected is None:
        return
    if credentials is None or not secrets.compare_digest(
        credentials.credentials.encode(), expected.encode()
    ):
        raise AuthenticationException()


def get_clock() -> Callable[[], datetime]:
    """Server clock used for due_at checks and the today window."""
    return utc_now


async def get_application_repo(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> IApplicationRepository:
    return ApplicationRepository(db)


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ITaskRepository:
    """Task repository on the request's write session."""
    return TaskRepository(db)


async def get_task_read_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ITaskRepository:
    """Task repository on a read-only (non-committing) session."""
    return TaskRepository(db)


async def get_create_task_use_case(
    application_repo: Annotated[IApplicationRepository, Depends(get_application_repo)],
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
) -> CreateTaskUseCase:
    return CreateTaskUseCase(application_repo, task_repo, clock=clock)


async def get_list_today_use_case(
    task_repo: Annotated[ITaskRepository, Depends(get_task_read_repo)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
) -> ListTodayTasksUseCase:
    return ListTodayTasksUseCase(task_repo, clock=clock)


async def get_complete_task_use_case(
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> CompleteTaskUseCase:
    return CompleteTaskUseCase(task_repo)
