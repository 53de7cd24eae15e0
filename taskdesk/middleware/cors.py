"""Permissive CORS middleware.

Answers OPTIONS (preflight) on any path with 200 and an empty body, and
adds the CORS header set to every other response that lacks it. Unlike
Starlette's CORSMiddleware the headers are sent whether or not the
request carries an Origin header.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

from taskdesk.core.cors import cors_headers


def CORSMiddleware(app: Callable) -> Callable:
    """Serve preflight and stamp CORS headers on all HTTP responses. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        header_list = [(k.lower().encode(), v.encode()) for k, v in cors_headers().items()]

        if scope["method"] == "OPTIONS":
            await send(
                {
                    "type": "http.response.start",
                    "status": 200,
                    "headers": header_list + [(b"content-length", b"0")],
                }
            )
            await send({"type": "http.response.body", "body": b""})
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                for name_b, value_b in header_list:
                    if name_b not in seen:
                        headers.append((name_b, value_b))
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
