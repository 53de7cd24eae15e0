"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from taskdesk.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _create_task_limit() -> str:
    return get_settings().create_task_rate_limit


limit_create_task = limiter.limit(_create_task_limit)
