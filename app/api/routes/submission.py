"""Write endpoint: feedback and signup submissions."""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_feedback_service
from app.api.schemas.envelope import (
    SubmissionResponse,
    envelope,
    error_envelope,
    internal_error_envelope,
)
from app.core.errors import InvalidActionError, MalformedRequestError, RequestError
from app.domain.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)
router = APIRouter()

SUBMIT_FEEDBACK = "submitFeedback"
INVALID_POST_ACTION_MESSAGE = "Invalid POST action."


async def _read_payload(request: Request) -> dict[str, Any]:
    """Decode the request body as a JSON object.

    Content type is not checked: browser clients often post text/plain
    to skip the CORS preflight.
    """
    body = await request.body()
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedRequestError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedRequestError("Request body must be a JSON object")
    return payload


@router.post("", response_class=JSONResponse)
async def handle_submission(
    request: Request,
    feedback_service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> JSONResponse:
    """Accept one submission and relay it to the operator by email.

    Example:
        POST /api
        {
            "action": "submitFeedback",
            "rating": 4,
            "feedbackText": "Great",
            "assistantName": "Item Writer"
        }
    """
    try:
        payload = await _read_payload(request)

        if payload.get("action") != SUBMIT_FEEDBACK:
            raise InvalidActionError(INVALID_POST_ACTION_MESSAGE)

        await feedback_service.submit(payload)
        return envelope(SubmissionResponse())
    except RequestError as e:
        logger.info(f"Rejected submission: {e}")
        return error_envelope(str(e))
    except Exception as e:
        logger.error(f"Unhandled error in submission handler: {e}", exc_info=True)
        return internal_error_envelope(e)
