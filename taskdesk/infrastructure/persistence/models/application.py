"""Application ORM model. Parent record of tasks; owns a tenant id."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taskdesk.infrastructure.persistence.database import Base
from taskdesk.infrastructure.persistence.models.mixins import KeyedRowMixin


class Application(KeyedRowMixin, Base):
    """Application owning tasks. Table: application. Read-only for this service."""

    __tablename__ = "application"

    tenant_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
