"""Task creation endpoint: POST /create-task.

Thin route delegating to CreateTaskUseCase. Other methods on the path get
405 from routing; OPTIONS is answered by the CORS middleware.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from taskdesk.api.v1.dependencies import get_create_task_use_case, require_api_key
from taskdesk.application.use_cases.tasks import CreateTaskUseCase
from taskdesk.core.limiter import limit_create_task
from taskdesk.schemas.task import (
    CreateTaskRequest,
    CreateTaskResponse,
    ErrorResponse,
    TaskResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post(
    "/create-task",
    response_model=CreateTaskResponse,
    responses={
        400: {"description": "Missing fields, invalid type, invalid or past due_at", "model": ErrorResponse},
        401: {"description": "API_KEY configured and bearer key missing or wrong", "model": ErrorResponse},
        404: {"description": "Application not found", "model": ErrorResponse},
        500: {"description": "Insert failed", "model": ErrorResponse},
    },
)
@limit_create_task
async def create_task(
    request: Request,
    use_case: Annotated[CreateTaskUseCase, Depends(get_create_task_use_case)],
    body: CreateTaskRequest | None = None,
) -> CreateTaskResponse:
    """Create an open task for an existing application.

    The task's tenant_id is copied from the application. Identical requests
    create separate tasks.
    """
    payload = body or CreateTaskRequest()
    task = await use_case.execute(
        payload.application_id,
        payload.task_type,
        payload.due_at,
    )
    return CreateTaskResponse(task_id=task.id, task=TaskResponse.from_result(task))
