"""Feedback service: validates submissions and emails them to the operator."""

import logging
from typing import Any, Protocol

from app.core.errors import DispatchFailureError
from app.domain.models.feedback import FeedbackSubmission, NotificationEmail
from app.domain.notifications.renderer import render_body, render_subject

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    """Outbound mail collaborator."""

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        from_email: str | None = None,
        from_name: str | None = None,
    ) -> dict:
        ...


class FeedbackService:
    """Service for turning one submission into one operator email.

    Single shot: a failed dispatch is reported and the submission dropped.
    """

    def __init__(
        self,
        mailer: Mailer,
        recipient: str,
        from_name: str | None = None,
        escape_html: bool = True,
    ) -> None:
        """Initialize feedback service.

        Args:
            mailer: Client used to send the notification
            recipient: Fixed operator address that receives every notification
            from_name: Sender display name
            escape_html: Escape user-supplied text before embedding it in the body
        """
        self.mailer = mailer
        self.recipient = recipient
        self.from_name = from_name
        self.escape_html = escape_html

    def build_notification(self, submission: FeedbackSubmission) -> NotificationEmail:
        """Render the operator email for a submission."""
        return NotificationEmail(
            to=self.recipient,
            subject=render_subject(submission),
            html_body=render_body(submission, escape=self.escape_html),
            from_name=self.from_name,
        )

    async def submit(self, payload: dict[str, Any]) -> NotificationEmail:
        """Validate, render and send a submission.

        Args:
            payload: Decoded request body

        Returns:
            The notification that was sent

        Raises:
            InvalidRatingError: If the rating is present but invalid (nothing is sent)
            DispatchFailureError: If the mailer fails
        """
        submission = FeedbackSubmission.from_payload(payload)
        if not submission.has_rating and not submission.has_email:
            logger.warning("Submission has neither rating nor email; sending anyway")

        notification = self.build_notification(submission)

        try:
            await self.mailer.send_email(
                to_email=notification.to,
                subject=notification.subject,
                html_content=notification.html_body,
                from_name=notification.from_name,
            )
        except Exception as e:
            logger.error(
                f"Failed to dispatch feedback notification: {e}",
                exc_info=True,
                extra={"subject": notification.subject},
            )
            raise DispatchFailureError(str(e)) from e

        logger.info(
            "Feedback notification sent",
            extra={"subject": notification.subject, "has_rating": submission.has_rating, "has_email": submission.has_email},
        )
        return notification
