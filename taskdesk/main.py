"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers, pages.
No business logic here. See taskdesk.core.lifespan and
taskdesk.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from taskdesk.api.v1 import api_router, create_task_router
from taskdesk.core.config import get_settings
from taskdesk.core.exception_handlers import register_exception_handlers
from taskdesk.core.lifespan import create_lifespan
from taskdesk.core.limiter import limiter
from taskdesk.middleware import CORSMiddleware, RequestIDMiddleware
from taskdesk.pages import (
    render_create_task_page,
    render_root_page,
    render_today_page,
)


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: request ID -> CORS -> routes.
    app.add_middleware(CORSMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(create_task_router, tags=["tasks"])
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root() -> HTMLResponse:
        """Landing page with links to the dashboard and API documentation."""
        return HTMLResponse(content=render_root_page(settings.app_name))

    @app.get("/dashboard/today", response_class=HTMLResponse, include_in_schema=False)
    def dashboard_today() -> HTMLResponse:
        """Today's open tasks (loaded client-side from /api/v1/tasks/today)."""
        return HTMLResponse(content=render_today_page(settings.app_name))

    @app.get("/dashboard/create-task", response_class=HTMLResponse, include_in_schema=False)
    def dashboard_create_task() -> HTMLResponse:
        """New-task form posting to /create-task."""
        return HTMLResponse(content=render_create_task_page(settings.app_name))

    return app


app = create_app()
