"""List today's open tasks (current UTC day, ordered by due_at)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from taskdesk.application.dtos.task import TodayTasks
from taskdesk.application.interfaces.repositories import ITaskRepository
from taskdesk.shared.utils.datetime import utc_day_bounds, utc_now


class ListTodayTasksUseCase:
    """Returns tasks that are not completed and fall due within today's UTC day."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._task_repo = task_repo
        self._clock = clock

    async def execute(self) -> TodayTasks:
        start, end = utc_day_bounds(self._clock())
        tasks = await self._task_repo.list_open_due_between(start, end)
        return TodayTasks(tasks=tasks, window_start=start, window_end=end)
