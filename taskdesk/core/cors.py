"""Cross-origin header set shared by the CORS middleware and exception handlers.

Every response (including errors produced outside the middleware stack)
carries the same permissive headers.
"""

from taskdesk.core.config import get_settings

ALLOW_METHODS = "GET, POST, OPTIONS"


def cors_headers() -> dict[str, str]:
    """Return the permissive CORS headers configured in settings."""
    settings = get_settings()
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
    }
