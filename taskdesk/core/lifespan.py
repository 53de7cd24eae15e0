"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of logging and the database engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskdesk.core.config import get_settings
from taskdesk.infrastructure.persistence import database
from taskdesk.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and the engine, yield, then dispose the engine."""
    settings = get_settings()
    setup_logging()
    database._ensure_engine()
    if settings.api_key_value is None:
        logger.warning(
            "API_KEY is not set; bearer authentication must be enforced by the hosting platform"
        )
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await database.dispose_engine()
