"""Request ID middleware.

Forwards a safe client X-Request-ID or generates one, echoes it on the
response and binds it to the logging context for the life of the request.
Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from sweem.shared.context import reset_request_id, set_request_id

# Letters, digits, "-" and "_" only, so a client value cannot forge log lines.
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def resolve_request_id(headers: list[tuple[bytes, bytes]], header_name: str) -> str:
    """Return the client's request id if present and safe, else a new uuid4."""
    wanted = header_name.lower().encode()
    for name, value in headers:
        if name.lower() == wanted:
            candidate = value.decode("latin-1").strip()
            if _SAFE_REQUEST_ID.match(candidate):
                return candidate
            break
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Tag each HTTP request and its response with a request id. Raw ASGI."""
    header_bytes = header_name.encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(scope.get("headers", []), header_name)
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_bytes, request_id.encode()),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_wrapper)
        finally:
            reset_request_id(token)

    return asgi_app
