"""Complete task use case: open -> completed, idempotent once completed."""

from __future__ import annotations

import logging

from taskdesk.application.dtos.task import TaskResult
from taskdesk.application.interfaces.repositories import ITaskRepository
from taskdesk.domain.enums import TaskStatus
from taskdesk.domain.exceptions import TaskNotFoundException

logger = logging.getLogger(__name__)


class CompleteTaskUseCase:
    """Marks a task completed. Completed is terminal; repeating the call is a no-op."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self._task_repo = task_repo

    async def execute(self, task_id: str) -> TaskResult:
        """Complete the task and return it.

        Raises:
            TaskNotFoundException: No task with task_id.
        """
        task = await self._task_repo.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        if not task.status.can_transition_to(TaskStatus.COMPLETED):
            return task
        updated = await self._task_repo.mark_completed(task_id)
        if updated is None:
            raise TaskNotFoundException(task_id)
        logger.info("Completed task %s", task_id)
        return updated
