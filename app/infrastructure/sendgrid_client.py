"""SendGrid email client for sending emails."""

import asyncio
import logging
from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Content, Email, Mail, To

from app.settings import settings

logger = logging.getLogger(__name__)


class SendGridClientError(Exception):
    """Base exception for SendGrid client errors."""
    pass


class SendGridNotConfiguredError(SendGridClientError):
    """No API key available."""
    pass


class SendGridClient:
    """Client for sending emails via SendGrid.

    Accepts credentials in the constructor and falls back to global
    settings if not provided. A missing API key is reported when sending,
    so read-only deployments can run without one.
    """

    def __init__(
        self,
        api_key: str | None = None,
        from_email: str | None = None,
        from_name: str | None = None,
    ):
        """Initialize SendGrid client.

        Args:
            api_key: SendGrid API key (defaults to global settings.sendgrid_api_key)
            from_email: Default sender email (defaults to global settings.sendgrid_from_email)
            from_name: Default sender display name (defaults to global settings.sendgrid_from_name)
        """
        self.api_key = api_key or settings.sendgrid_api_key
        self.default_from_email = from_email or settings.sendgrid_from_email
        self.default_from_name = from_name or settings.sendgrid_from_name
        self._client: SendGridAPIClient | None = None

    @property
    def client(self) -> SendGridAPIClient:
        """Lazy-load the SendGrid API client."""
        if self._client is None:
            if not self.api_key:
                raise SendGridNotConfiguredError(
                    "SendGrid API key must be provided or set in SENDGRID_API_KEY"
                )
            self._client = SendGridAPIClient(self.api_key)
        return self._client

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        from_email: Optional[str] = None,
        from_name: Optional[str] = None,
    ) -> dict:
        """
        Send an email via SendGrid.

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_content: HTML email body
            from_email: Sender email (defaults to instance default_from_email)
            from_name: Sender display name (defaults to instance default_from_name)

        Returns:
            Response dict with status and message_id

        Raises:
            SendGridClientError: If the client is not configured or SendGrid rejects the message
        """
        from_addr = from_email or self.default_from_email
        sender_name = from_name or self.default_from_name

        message = Mail(
            from_email=Email(from_addr, sender_name),
            to_emails=To(to_email),
            subject=subject,
            html_content=Content("text/html", html_content),
        )

        try:
            client = self.client
            # Sync HTTP call; keep it off the event loop
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(None, client.send, message)
        except SendGridClientError:
            raise
        except Exception as e:
            logger.error(f"Failed to send email to {to_email}: {e}", exc_info=True)
            raise SendGridClientError(f"Failed to send email: {e}") from e

        logger.info(
            "Email sent successfully",
            extra={"to": to_email, "subject": subject, "status_code": response.status_code},
        )

        return {
            "status": "success",
            "message_id": response.headers.get("X-Message-Id"),
            "status_code": response.status_code,
        }


# Singleton instance
_sendgrid_client: Optional[SendGridClient] = None


def get_sendgrid_client() -> SendGridClient:
    """Get or create SendGrid client singleton."""
    global _sendgrid_client
    if _sendgrid_client is None:
        _sendgrid_client = SendGridClient()
    return _sendgrid_client
