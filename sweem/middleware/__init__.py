"""HTTP middleware: timeout, request ID, security headers.

Applied in main app; order matters (first added = outermost).
"""

from sweem.middleware.request_id import RequestIDMiddleware
from sweem.middleware.security_headers import SecurityHeadersMiddleware
from sweem.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
