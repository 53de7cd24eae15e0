"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from taskdesk.application.interfaces import IApplicationRepository, ITaskRepository
from taskdesk.application.use_cases.tasks import (
    CompleteTaskUseCase,
    CreateTaskUseCase,
    ListTodayTasksUseCase,
)

__all__ = [
    "CompleteTaskUseCase",
    "CreateTaskUseCase",
    "IApplicationRepository",
    "ITaskRepository",
    "ListTodayTasksUseCase",
]
