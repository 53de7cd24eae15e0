"""Task use cases."""

from taskdesk.application.use_cases.tasks.complete_task import CompleteTaskUseCase
from taskdesk.application.use_cases.tasks.create_task import CreateTaskUseCase
from taskdesk.application.use_cases.tasks.list_today import ListTodayTasksUseCase

__all__ = [
    "CompleteTaskUseCase",
    "CreateTaskUseCase",
    "ListTodayTasksUseCase",
]
