"""Dashboard task API: today's open tasks and completion."""

from typing import Annotated

from fastapi import APIRouter, Depends

from taskdesk.api.v1.dependencies import (
    get_complete_task_use_case,
    get_list_today_use_case,
    require_api_key,
)
from taskdesk.application.use_cases.tasks import (
    CompleteTaskUseCase,
    ListTodayTasksUseCase,
)
from taskdesk.schemas.task import ErrorResponse, TaskResponse, TodayTasksResponse

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.get("/today", response_model=TodayTasksResponse)
async def list_today_tasks(
    use_case: Annotated[ListTodayTasksUseCase, Depends(get_list_today_use_case)],
) -> TodayTasksResponse:
    """Return tasks not completed and due within the current UTC day, earliest first."""
    today = await use_case.execute()
    return TodayTasksResponse(
        tasks=[TaskResponse.from_result(t) for t in today.tasks],
        window_start=today.window_start,
        window_end=today.window_end,
    )


@router.post(
    "/{task_id}/complete",
    response_model=TaskResponse,
    responses={404: {"description": "Task not found", "model": ErrorResponse}},
)
async def complete_task(
    task_id: str,
    use_case: Annotated[CompleteTaskUseCase, Depends(get_complete_task_use_case)],
) -> TaskResponse:
    """Mark a task completed. Completing a completed task returns it unchanged."""
    task = await use_case.execute(task_id)
    return TaskResponse.from_result(task)
