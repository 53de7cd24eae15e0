"""API v1: routers and dependencies."""

from taskdesk.api.v1.endpoints.create_task import router as create_task_router
from taskdesk.api.v1.router import api_router

__all__ = ["api_router", "create_task_router"]
