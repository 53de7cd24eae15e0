"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations.

The engine is built on first use rather than at import, so importing
models or repositories never reads DATABASE_URL. One engine per process;
lifespan disposes it on shutdown.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from taskdesk.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_OVERFLOW = 20
DEFAULT_COMMAND_TIMEOUT = 60

engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Pool sizing and driver arguments, with unset overrides falling back to defaults."""

    def pick(value: int | None, default: int) -> int:
        return default if value is None else value

    options: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": pick(settings.db_pool_size, DEFAULT_POOL_SIZE),
        "max_overflow": pick(settings.db_max_overflow, DEFAULT_MAX_OVERFLOW),
    }
    if "asyncpg" in settings.database_url:
        options["connect_args"] = {
            "command_timeout": pick(settings.db_command_timeout, DEFAULT_COMMAND_TIMEOUT)
        }
    return options


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    options = _engine_options(settings)
    engine = create_async_engine(settings.database_url, **options)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine, expire_on_commit=False, autoflush=False
    )
    logger.info("Database engine created (pool_size=%d)", options["pool_size"])


async def dispose_engine() -> None:
    """Dispose the engine (if created) and forget the session factory."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


class Base(DeclarativeBase):
    """Declarative base for the application and task tables."""


async def get_db() -> AsyncIterator[AsyncSession]:
    """Session for reads. Nothing is committed."""
    _ensure_engine()
    async with AsyncSessionLocal() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Session wrapped in one transaction: commit when the request succeeds, roll back if it raises.

    The create-task lookup and insert share this session.
    """
    _ensure_engine()
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
