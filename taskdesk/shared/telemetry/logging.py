"""Process-wide logging setup.

Every record is stamped with the current request id (or "-" outside a
request) by RequestIdLogFilter, so one request's lines can be grepped
together.
"""

import logging
import sys

from taskdesk.core.config import get_settings
from taskdesk.shared.context import RequestIdLogFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


def setup_logging() -> None:
    """Send logs to stdout at DEBUG (debug on) or INFO.

    SQL statement logging follows DATABASE_ECHO; otherwise the engine
    logger is held at WARNING.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        handlers=[handler],
        force=True,
    )
    engine_level = logging.INFO if settings.database_echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)
