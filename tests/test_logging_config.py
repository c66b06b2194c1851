"""Tests for structured logging."""

import json
import logging

from app.core.request_context import clear_request_context, set_request_context
from app.logging_config import ContextFilter, JSONFormatter


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    """Test core fields and extras end up in the JSON line."""
    record = _record("Could not load prompt", template_id="item_writer")

    data = json.loads(JSONFormatter().format(record))

    assert data["severity"] == "ERROR"
    assert data["message"] == "Could not load prompt"
    assert data["logger"] == "app.test"
    assert data["template_id"] == "item_writer"
    assert data["timestamp"].endswith("Z")


def test_context_filter_adds_request_id():
    """Test the request id from context is attached to records."""
    record = _record("hello")
    set_request_context("req-42")
    try:
        ContextFilter().filter(record)
    finally:
        clear_request_context()

    data = json.loads(JSONFormatter().format(record))
    assert data["request_id"] == "req-42"


def test_context_filter_without_request():
    """Test records outside a request carry no request id."""
    record = _record("startup")
    ContextFilter().filter(record)

    data = json.loads(JSONFormatter().format(record))
    assert "request_id" not in data


def test_json_formatter_tags_service():
    """Test every line names the service and environment it came from."""
    from app.settings import settings

    data = json.loads(JSONFormatter().format(_record("ready")))

    assert data["service"] == settings.service_name
    assert data["environment"] == settings.environment


def test_get_logger_returns_named_logger():
    """Test get_logger hands back the standard named logger."""
    from app.logging_config import get_logger

    assert get_logger("app.api.routes.query") is logging.getLogger("app.api.routes.query")
