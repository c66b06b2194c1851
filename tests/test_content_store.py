"""Tests for the file-backed content store."""

import pytest

from app.domain.assistants import DEFAULT_ASSISTANTS
from app.infrastructure.content_store import ContentNotFoundError, FileContentStore


def test_reads_template_file(tmp_path):
    """Test content is returned exactly as stored."""
    (tmp_path / "greeter.md").write_text("  Hello there.\n", encoding="utf-8")
    store = FileContentStore(templates_dir=tmp_path, suffix=".md")

    assert store.get_content_by_id("greeter") == "  Hello there.\n"


def test_reads_fresh_content_each_call(tmp_path):
    """Test edits on disk are picked up without a restart."""
    path = tmp_path / "greeter.md"
    path.write_text("v1", encoding="utf-8")
    store = FileContentStore(templates_dir=tmp_path, suffix=".md")

    assert store.get_content_by_id("greeter") == "v1"
    path.write_text("v2", encoding="utf-8")
    assert store.get_content_by_id("greeter") == "v2"


def test_missing_template(tmp_path):
    """Test a missing file raises ContentNotFoundError."""
    store = FileContentStore(templates_dir=tmp_path, suffix=".md")

    with pytest.raises(ContentNotFoundError):
        store.get_content_by_id("nowhere")


@pytest.mark.parametrize("template_id", ["../secrets", "nested/file", "..", ".", ""])
def test_rejects_path_like_ids(tmp_path, template_id):
    """Test ids that would escape the templates directory are refused."""
    store = FileContentStore(templates_dir=tmp_path, suffix=".md")

    with pytest.raises(ContentNotFoundError):
        store.get_content_by_id(template_id)


def test_bundled_templates_exist_for_builtin_catalog(templates_dir):
    """Test every built-in assistant has a non-empty bundled template."""
    store = FileContentStore(templates_dir=templates_dir, suffix=".md")

    for entry in DEFAULT_ASSISTANTS:
        assert store.get_content_by_id(entry.template_id).strip()
