"""Request ID middleware.

Every HTTP response carries a request id header. A client-supplied id is
kept only if it is short and limited to letters, digits, "-" and "_";
anything else is replaced with a fresh UUID so it cannot forge log lines.
The id is exposed to logging through taskdesk.shared.context.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from taskdesk.middleware._headers import get_header
from taskdesk.shared.context import reset_request_id, set_request_id

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


def _request_id_for(raw: str | None) -> str:
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Forward or assign the request id and echo it on the response. Raw ASGI."""
    header_b = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _request_id_for(get_header(scope, header_name))
        token = set_request_id(request_id)

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_b, request_id.encode()),
                ]
            await send(message)

        try:
            await app(scope, receive, send_with_id)
        finally:
            reset_request_id(token)

    return asgi_app
