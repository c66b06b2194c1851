"""Response envelopes.

Every reply is HTTP 200 with a JSON body; `success` is the only
failure signal clients should look at.
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

INTERNAL_ERROR_PREFIX = "Internal Server Error: "


class ErrorResponse(BaseModel):
    """Failed request."""

    success: bool = False
    error: str


class AssistantListResponse(BaseModel):
    """listAssistants result."""

    success: bool = True
    assistants: list[str]


class PromptResponse(BaseModel):
    """getPrompt result."""

    success: bool = True
    assistant: str
    prompt: str


class SubmissionResponse(BaseModel):
    """submitFeedback result."""

    success: bool = True
    message: str = "Submission successful."


def envelope(body: BaseModel) -> JSONResponse:
    """Serialize a response model, always with status 200."""
    return JSONResponse(content=body.model_dump(), status_code=200)


def error_envelope(message: str) -> JSONResponse:
    return envelope(ErrorResponse(error=message))


def internal_error_envelope(exc: Any) -> JSONResponse:
    return error_envelope(f"{INTERNAL_ERROR_PREFIX}{exc}")
