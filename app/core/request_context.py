"""Request context for correlating log lines with a single request."""

from contextvars import ContextVar
from typing import Optional

# Context variable for the current request id
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_context(request_id: str | None) -> None:
    """Set the current request context.

    Args:
        request_id: Request ID to set in context
    """
    request_id_var.set(request_id)


def get_request_context() -> str | None:
    """Get the current request context.

    Returns:
        Current request ID or None
    """
    return request_id_var.get()


def clear_request_context() -> None:
    """Clear the current request context."""
    request_id_var.set(None)
