"""Task ORM model. Follow-up (call/email/review) for one application."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from taskdesk.domain.enums import TaskStatus, TaskType
from taskdesk.infrastructure.persistence.database import Base
from taskdesk.infrastructure.persistence.models.mixins import KeyedRowMixin


def _in_list(column: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


class Task(KeyedRowMixin, Base):
    """Task created through POST /create-task. Table: task.

    tenant_id is copied from the application at insert time.
    """

    __tablename__ = "task"

    application_id: Mapped[str] = mapped_column(
        String, ForeignKey("application.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tenant_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    due_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="open", server_default="open"
    )

    __table_args__ = (
        CheckConstraint(_in_list("type", TaskType.values()), name="ck_task_type"),
        CheckConstraint(_in_list("status", TaskStatus.values()), name="ck_task_status"),
        Index("ix_task_status_due_at", "status", "due_at"),
    )
