"""Request context shared with logging.

RequestIDMiddleware sets the current request id in this context variable;
the logging filter in app.shared.telemetry.logging reads it so every log
line emitted while handling a request carries the id.
"""

from contextvars import ContextVar, Token

# Current request ID (set by middleware, read by the log record filter).
current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token:
    """Set the request ID for this context; returns a token for reset_request_id."""
    return current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID if set."""
    return current_request_id.get()
