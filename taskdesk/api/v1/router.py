"""API v1 router aggregation.

Includes the dashboard JSON API and health probes under /api/v1. The
create-task route is mounted at the application root (see main.py).
"""

from fastapi import APIRouter

from taskdesk.api.v1.endpoints import health, tasks

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
