"""HTTP middleware: CORS (preflight + headers) and request ID.

Applied in main app; order matters (last added = outermost).
Import and use from taskdesk.main.
"""

from taskdesk.middleware.cors import CORSMiddleware
from taskdesk.middleware.request_id import RequestIDMiddleware

__all__ = [
    "CORSMiddleware",
    "RequestIDMiddleware",
]
