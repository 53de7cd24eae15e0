"""Seed dev data from scripts/seed-data.json into Postgres.

Creates applications (by id; skipped if present) and optional demo tasks.
Tasks go through CreateTaskUseCase so they pass the same validation as
POST /create-task. Task due times are given as hours from now.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL (Postgres) and `alembic upgrade head`.
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from taskdesk.application.use_cases.tasks import CreateTaskUseCase
from taskdesk.infrastructure.persistence import database as db_mod
from taskdesk.infrastructure.persistence.models.application import Application
from taskdesk.infrastructure.persistence.repositories import (
    ApplicationRepository,
    TaskRepository,
)
from taskdesk.shared.utils.datetime import isoformat_utc, utc_now


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)
    applications_data = data.get("applications", [])
    tasks_data = data.get("tasks", [])

    db_mod._ensure_engine()
    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            application_repo = ApplicationRepository(session)
            task_repo = TaskRepository(session)

            for a in applications_data:
                existing = await application_repo.get_by_id(a["id"])
                if existing:
                    print(f"Application {a['id']} exists (tenant {existing.tenant_id}), skip")
                    continue
                session.add(Application(id=a["id"], tenant_id=a["tenant_id"]))
                await session.flush()
                print(f"Application {a['id']} -> tenant {a['tenant_id']}")

            create_task = CreateTaskUseCase(application_repo, task_repo)
            now = utc_now()
            for t in tasks_data:
                due_at = now + timedelta(hours=float(t.get("due_in_hours", 1)))
                task = await create_task.execute(
                    t["application_id"], t["task_type"], isoformat_utc(due_at)
                )
                print(f"  Task {task.id} ({task.type.value}) due {isoformat_utc(task.due_at)}")

    await db_mod.dispose_engine()
    print("Seed complete.")


def main() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else _project_root() / "scripts" / "seed-data.json"
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
