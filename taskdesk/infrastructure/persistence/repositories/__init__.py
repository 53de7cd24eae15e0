"""Persistence repositories. Re-exports for dependency injection."""

from taskdesk.infrastructure.persistence.repositories.application_repo import (
    ApplicationRepository,
)
from taskdesk.infrastructure.persistence.repositories.base import BaseRepository
from taskdesk.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "ApplicationRepository",
    "BaseRepository",
    "TaskRepository",
]
