"""Data models for feedback and signup submissions."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.errors import InvalidRatingError

MIN_RATING = 1
MAX_RATING = 5


def parse_rating(raw: Any) -> int | None:
    """Normalize a submitted rating.

    Missing, null and empty-string ratings count as "no rating".

    Raises:
        InvalidRatingError: If a rating is present but not an integer in 1-5
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None

    # bool is an int subclass; a checkbox value is not a rating
    if isinstance(raw, bool):
        raise InvalidRatingError()

    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            raise InvalidRatingError() from None
    else:
        raise InvalidRatingError()

    if not MIN_RATING <= value <= MAX_RATING:
        raise InvalidRatingError()
    return value


class FeedbackSubmission(BaseModel):
    """A single feedback and/or signup payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    rating: int | None = None
    feedback_text: str | None = Field(default=None, alias="feedbackText")
    assistant_name: str | None = Field(default=None, alias="assistantName")
    email: str | None = None

    @field_validator("feedback_text", "assistant_name", "email", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = value if isinstance(value, str) else str(value)
        return text if text.strip() else None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "FeedbackSubmission":
        """Build a submission from a decoded request body.

        Raises:
            InvalidRatingError: If the rating is out of range or not an integer
        """
        data = dict(payload)
        data["rating"] = parse_rating(payload.get("rating"))
        return cls.model_validate(data)

    @property
    def has_rating(self) -> bool:
        return self.rating is not None

    @property
    def has_email(self) -> bool:
        return self.email is not None


class NotificationEmail(BaseModel):
    """Rendered operator notification, built per request and then dropped."""

    to: str
    subject: str
    html_body: str
    from_name: str | None = None
