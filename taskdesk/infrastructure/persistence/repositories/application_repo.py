"""Application repository (read-only). Returns application DTOs."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.application.dtos.task import ApplicationResult
from taskdesk.infrastructure.persistence.models.application import Application
from taskdesk.infrastructure.persistence.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    """Application repository. Implements IApplicationRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Application)

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        """Return the application's id and tenant_id, or None."""
        application = await self._get_model(application_id)
        if application is None:
            return None
        return ApplicationResult(id=application.id, tenant_id=application.tenant_id)
