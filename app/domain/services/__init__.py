"""Domain services."""

from app.domain.services.feedback_service import FeedbackService
from app.domain.services.prompt_service import PromptService

__all__ = ["FeedbackService", "PromptService"]
