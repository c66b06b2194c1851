"""Prompt service for resolving assistants and loading their prompt text."""

import logging

from app.core.errors import ContentUnavailableError, EmptyContentError
from app.domain.assistants.registry import AssistantRegistry
from app.infrastructure.content_store import ContentStore

logger = logging.getLogger(__name__)


class PromptService:
    """Service for looking up assistants and loading prompts.

    Nothing is cached: every call goes back to the content store.
    """

    def __init__(self, registry: AssistantRegistry, store: ContentStore) -> None:
        """Initialize prompt service."""
        self.registry = registry
        self.store = store

    def list_assistants(self) -> list[str]:
        """Return assistant display names in catalog order."""
        return self.registry.list_names()

    def load(self, template_id: str) -> str:
        """Load prompt text for a template id.

        Args:
            template_id: Opaque handle into the content store

        Returns:
            Prompt text, exactly as stored

        Raises:
            ContentUnavailableError: If the store could not supply content
            EmptyContentError: If the content is blank after trimming
        """
        try:
            content = self.store.get_content_by_id(template_id)
        except Exception as e:
            logger.error(
                f"Content store failed for template {template_id}: {e}",
                exc_info=True,
                extra={"template_id": template_id, "error_type": type(e).__name__},
            )
            raise ContentUnavailableError(template_id, str(e)) from e

        if content is None:
            logger.error(f"Content store returned nothing for template {template_id}")
            raise ContentUnavailableError(template_id, "no content returned")

        if not content.strip():
            logger.error(f"Prompt template {template_id} is empty")
            raise EmptyContentError(template_id, "content is blank")

        return content

    def get_prompt(self, name: str | None) -> str:
        """Resolve an assistant by display name and load its prompt.

        Raises:
            AssistantNotFoundError: If the name is not registered
            PromptLoadError: If the prompt could not be loaded
        """
        template_id = self.registry.resolve(name)
        return self.load(template_id)
