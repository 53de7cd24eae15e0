"""Columns shared by the application and task tables."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from taskdesk.shared.utils.generators import generate_cuid


class KeyedRowMixin:
    """CUID2 primary key plus database-maintained created_at / updated_at.

    updated_at moves on every ORM update, so a completed task records
    when it was completed. Eager defaults load both timestamps with
    RETURNING on INSERT and UPDATE, so no follow-up SELECT is issued.
    """

    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
