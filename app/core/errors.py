"""Error types surfaced by the assistant and feedback endpoints."""


class AssistantHubError(Exception):
    """Base exception for assistant hub errors."""
    pass


class RequestError(AssistantHubError):
    """Client-side problem whose message is safe to show as-is."""
    pass


class InvalidActionError(RequestError):
    """Unrecognized or missing action."""
    pass


class InvalidRatingError(RequestError):
    """Rating outside 1-5 or not an integer."""

    def __init__(self, message: str = "Invalid rating provided.") -> None:
        super().__init__(message)


class AssistantNotFoundError(RequestError):
    """Assistant name is not in the registry."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"Assistant '{name}' not found.")


class PromptLoadError(AssistantHubError):
    """Prompt text could not be produced for a template id."""

    def __init__(self, template_id: str, reason: str) -> None:
        self.template_id = template_id
        self.reason = reason
        super().__init__(f"{reason} (template_id={template_id})")


class ContentUnavailableError(PromptLoadError):
    """Content store has no content for the template id."""
    pass


class EmptyContentError(PromptLoadError):
    """Content exists but is blank after trimming."""
    pass


class MalformedRequestError(AssistantHubError):
    """Request body could not be parsed."""
    pass


class DispatchFailureError(AssistantHubError):
    """Notification email could not be sent."""
    pass
