"""Middleware for request correlation."""

import logging
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.schemas.envelope import internal_error_envelope
from app.core.request_context import (
    clear_request_context,
    get_request_context,
    set_request_context,
)

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_current_request_id() -> str | None:
    """Return the id of the request being handled, if any."""
    return get_request_context()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that tags every request with an id.

    Also the last stop for errors that escape a route's own handling,
    such as a dependency failing to build; those still get the JSON
    envelope and the request id header.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with a request id in context.

        Args:
            request: FastAPI request
            call_next: Next middleware/handler

        Returns:
            Response carrying the X-Request-ID header
        """
        # Reuse the caller's id so logs line up across hops
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        set_request_context(request_id)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {request.url.path}: {e}", exc_info=True)
            response = internal_error_envelope(e)
        finally:
            clear_request_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
