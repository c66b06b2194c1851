"""FastAPI dependencies for the assistant catalog and mail delivery."""

import logging
from typing import Annotated, Optional

from fastapi import Depends

from app.domain.assistants.catalog import DEFAULT_ASSISTANTS
from app.domain.assistants.registry import AssistantRegistry
from app.domain.services.feedback_service import FeedbackService, Mailer
from app.domain.services.prompt_service import PromptService
from app.infrastructure.content_store import ContentStore, FileContentStore
from app.infrastructure.sendgrid_client import get_sendgrid_client
from app.settings import settings

logger = logging.getLogger(__name__)

# Built once per process; read-only afterwards
_registry: Optional[AssistantRegistry] = None


def build_registry() -> AssistantRegistry:
    """Build the registry from the deploy-time catalog file or the built-in table."""
    if settings.assistant_catalog_file:
        logger.info(f"Loading assistant catalog from {settings.assistant_catalog_file}")
        return AssistantRegistry.from_json_file(settings.assistant_catalog_file)
    return AssistantRegistry(DEFAULT_ASSISTANTS)


def get_assistant_registry() -> AssistantRegistry:
    """Get or create the assistant registry singleton."""
    global _registry
    if _registry is None:
        _registry = build_registry()
    return _registry


def get_content_store() -> ContentStore:
    """Get the prompt template store."""
    return FileContentStore()


def get_prompt_service(
    registry: Annotated[AssistantRegistry, Depends(get_assistant_registry)],
    store: Annotated[ContentStore, Depends(get_content_store)],
) -> PromptService:
    """Get a prompt service bound to the registry and store."""
    return PromptService(registry, store)


def get_mailer() -> Mailer:
    """Get the outbound mail client."""
    return get_sendgrid_client()


def get_feedback_service(
    mailer: Annotated[Mailer, Depends(get_mailer)],
) -> FeedbackService:
    """Get a feedback service that mails the configured operator address."""
    return FeedbackService(
        mailer=mailer,
        recipient=settings.feedback_recipient_email,
        from_name=settings.sendgrid_from_name,
        escape_html=settings.notification_escape_html,
    )
