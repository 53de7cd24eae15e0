"""initial schema: application and task tables

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-17

Application rows are seeded externally; task rows are inserted by
POST /create-task with tenant_id copied from the application.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c2e3f4b5d6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "application",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_application_tenant_id", "application", ["tenant_id"], unique=False)

    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("application_id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("due_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="open"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["application_id"], ["application.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint("type IN ('call', 'email', 'review')", name="ck_task_type"),
        sa.CheckConstraint("status IN ('open', 'completed')", name="ck_task_status"),
    )
    op.create_index("ix_task_application_id", "task", ["application_id"], unique=False)
    op.create_index("ix_task_tenant_id", "task", ["tenant_id"], unique=False)
    op.create_index("ix_task_status_due_at", "task", ["status", "due_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_task_status_due_at", table_name="task")
    op.drop_index("ix_task_tenant_id", table_name="task")
    op.drop_index("ix_task_application_id", table_name="task")
    op.drop_table("task")
    op.drop_index("ix_application_tenant_id", table_name="application")
    op.drop_table("application")
