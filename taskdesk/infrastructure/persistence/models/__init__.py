"""ORM models. Import here so Alembic sees every table on Base.metadata."""

from taskdesk.infrastructure.persistence.models.application import Application
from taskdesk.infrastructure.persistence.models.task import Task

__all__ = ["Application", "Task"]
