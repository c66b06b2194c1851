"""Tests for the write endpoint."""

import json


def test_submit_feedback(client, mailer):
    """Test a rated submission is emailed and acknowledged."""
    response = client.post(
        "/api",
        json={
            "action": "submitFeedback",
            "rating": 4,
            "feedbackText": "Great",
            "assistantName": "Item Writer",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Submission successful."}
    assert len(mailer.sent) == 1
    assert mailer.sent[0]["subject"] == "New Feedback: 4★"
    assert "Item Writer" in mailer.sent[0]["html_content"]


def test_submit_signup_only(client, mailer):
    """Test an email-only signup."""
    response = client.post("/api", json={"action": "submitFeedback", "email": "a@b.com"})

    assert response.json() == {"success": True, "message": "Submission successful."}
    assert mailer.sent[0]["subject"] == "New Signup & Feedback: Email Only"
    assert "a@b.com" in mailer.sent[0]["html_content"]


def test_submit_text_plain_body(client, mailer):
    """Test JSON sent as text/plain is accepted."""
    response = client.post(
        "/api",
        content=json.dumps({"action": "submitFeedback", "rating": 5}),
        headers={"Content-Type": "text/plain"},
    )

    assert response.json()["success"] is True
    assert mailer.sent[0]["subject"] == "New Feedback: 5★"


def test_submit_sends_to_operator(client, mailer):
    """Test notifications go to the configured operator address."""
    from app.settings import settings

    client.post("/api", json={"action": "submitFeedback", "rating": 2})

    assert mailer.sent[0]["to_email"] == settings.feedback_recipient_email


def test_invalid_rating(client, mailer):
    """Test an out-of-range rating is rejected and nothing is sent."""
    response = client.post("/api", json={"action": "submitFeedback", "rating": 9})

    assert response.status_code == 200
    assert response.json() == {"success": False, "error": "Invalid rating provided."}
    assert mailer.sent == []


def test_invalid_post_action(client, mailer):
    """Test an unknown action is refused without sending."""
    response = client.post("/api", json={"action": "deleteEverything", "rating": 3})

    assert response.status_code == 200
    assert response.json() == {"success": False, "error": "Invalid POST action."}
    assert mailer.sent == []


def test_missing_action(client, mailer):
    """Test a body without an action."""
    response = client.post("/api", json={"rating": 3})

    assert response.json() == {"success": False, "error": "Invalid POST action."}
    assert mailer.sent == []


def test_unparseable_body(client, mailer):
    """Test a non-JSON body becomes an internal-error envelope."""
    response = client.post("/api", content="not json{", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["error"].startswith("Internal Server Error: ")
    assert mailer.sent == []


def test_non_object_body(client, mailer):
    """Test a JSON array body is rejected."""
    response = client.post("/api", json=["submitFeedback"])

    body = response.json()
    assert body["success"] is False
    assert body["error"].startswith("Internal Server Error: ")
    assert mailer.sent == []


def test_dispatch_failure(client, failing_mailer):
    """Test a mail failure is reported in the envelope."""
    from app.api.deps import get_mailer
    from app.main import app

    app.dependency_overrides[get_mailer] = lambda: failing_mailer

    response = client.post("/api", json={"action": "submitFeedback", "rating": 5})

    assert response.status_code == 200
    assert response.json() == {"success": False, "error": "Internal Server Error: SendGrid down"}
