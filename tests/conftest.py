"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from app.api.deps import get_assistant_registry, get_content_store, get_mailer
from app.domain.assistants.registry import AssistantEntry, AssistantRegistry
from app.infrastructure.content_store import ContentNotFoundError


class FakeContentStore:
    """In-memory content store keyed by template id."""

    def __init__(self, contents: dict[str, str]):
        self.contents = contents
        self.calls: list[str] = []

    def get_content_by_id(self, template_id: str) -> str:
        self.calls.append(template_id)
        if template_id not in self.contents:
            raise ContentNotFoundError(f"No template {template_id}")
        return self.contents[template_id]


class FakeMailer:
    """Records sent emails instead of calling SendGrid."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent: list[dict] = []

    async def send_email(self, to_email, subject, html_content, from_email=None, from_name=None):
        if self.error is not None:
            raise self.error
        self.sent.append(
            {
                "to_email": to_email,
                "subject": subject,
                "html_content": html_content,
                "from_name": from_name,
            }
        )
        return {"status": "success", "message_id": "test-id", "status_code": 202}


@pytest.fixture
def registry():
    """Small registry with one healthy, one blank and one missing template."""
    return AssistantRegistry(
        [
            AssistantEntry(display_name="Item Writer", template_id="item_writer"),
            AssistantEntry(display_name="Blank Bot", template_id="blank"),
            AssistantEntry(display_name="Ghost", template_id="missing"),
        ]
    )


@pytest.fixture
def content_store():
    return FakeContentStore(
        {
            "item_writer": "You write assessment items.\n",
            "blank": "   \n\t",
        }
    )


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def templates_dir() -> Path:
    """The templates bundled with the package."""
    return Path(__file__).parent.parent / "app" / "prompts" / "templates"


@pytest.fixture
def client(registry, content_store, mailer):
    """Create a test FastAPI client with fake collaborators."""
    from fastapi.testclient import TestClient
    from app.main import app

    app.dependency_overrides[get_assistant_registry] = lambda: registry
    app.dependency_overrides[get_content_store] = lambda: content_store
    app.dependency_overrides[get_mailer] = lambda: mailer

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def failing_mailer():
    return FakeMailer(error=RuntimeError("SendGrid down"))
