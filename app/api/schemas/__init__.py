"""API schemas package."""

from app.api.schemas.envelope import (
    AssistantListResponse,
    ErrorResponse,
    PromptResponse,
    SubmissionResponse,
)

__all__ = [
    "AssistantListResponse",
    "ErrorResponse",
    "PromptResponse",
    "SubmissionResponse",
]
