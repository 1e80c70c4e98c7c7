"""Request-scoped context (contextvars).

Holds the id of the request being served so log records can carry it.
Scoped to the current async task; set by RequestIDMiddleware.
"""

from contextvars import ContextVar, Token

NO_REQUEST_ID = "-"

_request_id: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)


def set_request_id(request_id: str) -> Token[str]:
    """Bind request_id to the current context; pass the token to reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


def get_request_id() -> str:
    """Return the current request id, or "-" outside a request."""
    return _request_id.get()
