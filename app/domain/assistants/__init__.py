"""Catalog of named assistants and the templates that back them.

- Catalog: the static name -> template id table shipped with the service
- Registry: ordered, read-only lookup built once at startup
"""

from app.domain.assistants.catalog import DEFAULT_ASSISTANTS
from app.domain.assistants.registry import AssistantEntry, AssistantRegistry

__all__ = ["AssistantEntry", "AssistantRegistry", "DEFAULT_ASSISTANTS"]
