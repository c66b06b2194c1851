"""Read-only registry mapping assistant display names to template ids."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

from app.core.errors import AssistantNotFoundError


@dataclass(frozen=True)
class AssistantEntry:
    """One catalog row: what users see and where its prompt lives."""

    display_name: str
    template_id: str


class AssistantRegistry:
    """Ordered name -> template id lookup.

    Built once from a static table; there is no way to add or remove
    entries afterwards.
    """

    def __init__(self, entries: Iterable[AssistantEntry]) -> None:
        """Initialize registry.

        Args:
            entries: Catalog rows in display order

        Raises:
            ValueError: If a display name appears more than once
        """
        self._entries: dict[str, AssistantEntry] = {}
        for entry in entries:
            if entry.display_name in self._entries:
                raise ValueError(f"Duplicate assistant name: {entry.display_name}")
            self._entries[entry.display_name] = entry

    @classmethod
    def from_json_file(cls, path: Path) -> "AssistantRegistry":
        """Load a registry from a deploy-time JSON catalog.

        Accepts either a list of {"name": ..., "templateId": ...} objects
        or an object mapping name to template id. File order is kept.
        """
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        return cls(_parse_catalog(raw))

    def list_names(self) -> list[str]:
        """Return display names in catalog order."""
        return list(self._entries)

    def resolve(self, name: str | None) -> str:
        """Return the template id for an assistant name.

        Raises:
            AssistantNotFoundError: If the name is missing or unknown
        """
        if not name or name not in self._entries:
            raise AssistantNotFoundError(name)
        return self._entries[name].template_id

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[AssistantEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _parse_catalog(raw: Any) -> list[AssistantEntry]:
    if isinstance(raw, dict):
        return [AssistantEntry(display_name=str(k), template_id=str(v)) for k, v in raw.items()]

    if isinstance(raw, list):
        entries = []
        for item in raw:
            if not isinstance(item, dict) or "name" not in item or "templateId" not in item:
                raise ValueError(f"Invalid catalog entry: {item!r}")
            entries.append(
                AssistantEntry(display_name=str(item["name"]), template_id=str(item["templateId"]))
            )
        return entries

    raise ValueError("Assistant catalog must be a JSON object or array")
