"""Request context management using contextvars.

Holds the current request id so log records can carry it without passing
it through every call. Scoped to the current async task.
"""

import logging
from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token:
    """Set the request id for this request; returns a token for reset."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _current_request_id.get()


class RequestIdLogFilter(logging.Filter):
    """Attach request_id ("-" outside a request) to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True
