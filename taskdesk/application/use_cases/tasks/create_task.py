"""Create task use case: validate, resolve the owning application, insert one row."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from taskdesk.application.dtos.task import TaskCreate, TaskResult
from taskdesk.application.interfaces.repositories import (
    IApplicationRepository,
    ITaskRepository,
)
from taskdesk.application.services.task_request_validator import (
    validate_create_task_request,
)
from taskdesk.domain.enums import TaskStatus
from taskdesk.domain.exceptions import ApplicationNotFoundException
from taskdesk.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Creates a task for an existing application.

    Performs exactly one application read and, when every check passes,
    exactly one task insert. Identical requests are not deduplicated.
    """

    def __init__(
        self,
        application_repo: IApplicationRepository,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._application_repo = application_repo
        self._task_repo = task_repo
        self._clock = clock

    async def execute(
        self,
        application_id: str | None,
        task_type: str | None,
        due_at: str | None,
    ) -> TaskResult:
        """Validate the request and insert the task.

        Args:
            application_id: Id of the owning application.
            task_type: One of call, email, review.
            due_at: ISO-8601 timestamp strictly in the future.

        Returns:
            The inserted task.

        Raises:
            ValidationException: From validate_create_task_request (missing fields,
                bad type, bad date, past date).
            ApplicationNotFoundException: Application missing or its lookup failed.
            TaskInsertException: From the repository when the insert fails.
        """
        request = validate_create_task_request(
            application_id, task_type, due_at, now=self._clock()
        )

        try:
            application = await self._application_repo.get_by_id(request.application_id)
        except Exception as e:
            logger.warning(
                "Application lookup failed for %s: %s", request.application_id, e
            )
            raise ApplicationNotFoundException(request.application_id) from e
        if application is None:
            raise ApplicationNotFoundException(request.application_id)

        task = await self._task_repo.create(
            TaskCreate(
                application_id=request.application_id,
                tenant_id=application.tenant_id,
                type=request.task_type,
                due_at=request.due_at,
                status=TaskStatus.OPEN,
            )
        )
        logger.info(
            "Created %s task %s for application %s due %s",
            task.type.value,
            task.id,
            task.application_id,
            task.due_at.isoformat(),
        )
        return task
