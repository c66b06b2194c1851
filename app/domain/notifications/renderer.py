"""Renderer for turning a feedback submission into an operator email."""

import html

from app.domain.models.feedback import MAX_RATING, FeedbackSubmission

FILLED_STAR = "★"
EMPTY_STAR = "☆"

BANNER = "<p>A new submission has arrived from the Assistant Hub.</p>"
NO_FEEDBACK_PLACEHOLDER = "No detailed feedback provided."
NO_ASSISTANT_PLACEHOLDER = "N/A"


def render_stars(rating: int) -> str:
    """Render `rating` filled stars followed by the remaining empty ones."""
    return FILLED_STAR * rating + EMPTY_STAR * (MAX_RATING - rating)


def render_subject(submission: FeedbackSubmission) -> str:
    """Render the notification subject line."""
    if submission.has_email:
        if submission.has_rating:
            return f"New Signup & Feedback: {submission.rating}{FILLED_STAR}"
        return "New Signup & Feedback: Email Only"

    if submission.has_rating:
        return f"New Feedback: {submission.rating}{FILLED_STAR}"
    return "New Feedback: No Rating"


def render_feedback_section(submission: FeedbackSubmission, escape: bool = True) -> str:
    """Render the rating block (assistant used, stars, feedback text)."""
    clean = html.escape if escape else str
    assistant = clean(submission.assistant_name) if submission.assistant_name else NO_ASSISTANT_PLACEHOLDER
    feedback = clean(submission.feedback_text) if submission.feedback_text else NO_FEEDBACK_PLACEHOLDER

    lines = [
        "<h3>Feedback</h3>",
        f"<p><strong>Assistant Used:</strong> {assistant}</p>",
        f"<p><strong>Rating:</strong> {render_stars(submission.rating)}</p>",
        "<p><strong>Feedback:</strong></p>",
        f"<blockquote>{feedback}</blockquote>",
    ]
    return "\n".join(lines)


def render_signup_section(submission: FeedbackSubmission, escape: bool = True) -> str:
    """Render the signup announcement block."""
    email = html.escape(submission.email) if escape else submission.email
    lines = [
        "<h3>New Signup</h3>",
        f"<p>A user signed up for updates with the email address: <strong>{email}</strong></p>",
    ]
    return "\n".join(lines)


def render_body(submission: FeedbackSubmission, escape: bool = True) -> str:
    """Render the full HTML body.

    The banner is always present. A submission with neither a rating nor
    an email still renders (banner only).
    """
    sections = [BANNER]

    if submission.has_rating:
        sections.append(render_feedback_section(submission, escape=escape))

    if submission.has_email:
        sections.append(render_signup_section(submission, escape=escape))

    return "\n".join(sections)
