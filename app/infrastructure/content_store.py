"""File-backed content store for bundled prompt templates."""

import logging
from pathlib import Path
from typing import Protocol

from app.settings import settings

logger = logging.getLogger(__name__)


class ContentStoreError(Exception):
    """Base exception for content store errors."""
    pass


class ContentNotFoundError(ContentStoreError):
    """No content exists for the requested id."""
    pass


class ContentStore(Protocol):
    """Anything that can hand back template text by id."""

    def get_content_by_id(self, template_id: str) -> str:
        ...


class FileContentStore:
    """Reads `<templates_dir>/<template_id><suffix>` from disk.

    Files are read on every call so edits show up without a restart.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        suffix: str | None = None,
    ):
        """Initialize content store.

        Args:
            templates_dir: Directory holding template files (defaults to settings.prompt_templates_dir)
            suffix: File extension appended to template ids (defaults to settings.prompt_template_suffix)
        """
        self.templates_dir = Path(templates_dir or settings.prompt_templates_dir)
        self.suffix = suffix if suffix is not None else settings.prompt_template_suffix

    def _path_for(self, template_id: str) -> Path:
        # Template ids are bare file stems; anything path-like is rejected
        if not template_id or Path(template_id).name != template_id or template_id in (".", ".."):
            raise ContentNotFoundError(f"Invalid template id: {template_id!r}")
        return self.templates_dir / f"{template_id}{self.suffix}"

    def get_content_by_id(self, template_id: str) -> str:
        """Return the raw template text.

        Raises:
            ContentNotFoundError: If no template file exists for the id
        """
        path = self._path_for(template_id)
        if not path.is_file():
            raise ContentNotFoundError(f"No template file at {path}")

        logger.debug("Reading prompt template", extra={"template_id": template_id, "path": str(path)})
        return path.read_text(encoding="utf-8")
