"""Base repository: generic lookup and insert over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id and create.

    Subclasses map ORM rows to application DTOs; callers never see ORM objects.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get_model(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _add(self, obj: ModelType) -> ModelType:
        """Persist a new record. Server defaults come back through INSERT .. RETURNING."""
        self.db.add(obj)
        await self.db.flush()
        return obj
