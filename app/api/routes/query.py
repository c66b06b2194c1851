"""Read endpoint: assistant listing and prompt retrieval."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_prompt_service
from app.api.schemas.envelope import (
    AssistantListResponse,
    PromptResponse,
    envelope,
    error_envelope,
    internal_error_envelope,
)
from app.core.errors import (
    AssistantNotFoundError,
    InvalidActionError,
    PromptLoadError,
    RequestError,
)
from app.domain.services.prompt_service import PromptService

logger = logging.getLogger(__name__)
router = APIRouter()

LIST_ASSISTANTS = "listAssistants"
GET_PROMPT = "getPrompt"
INVALID_ACTION_MESSAGE = "Invalid action or missing parameters."


@router.get("", response_class=JSONResponse)
def handle_query(
    prompt_service: Annotated[PromptService, Depends(get_prompt_service)],
    action: str | None = None,
    assistant: str | None = None,
) -> JSONResponse:
    """Dispatch a read request.

    - ?action=listAssistants
    - ?action=getPrompt&assistant=<name>
    """
    try:
        if action == LIST_ASSISTANTS:
            return envelope(AssistantListResponse(assistants=prompt_service.list_assistants()))

        if action == GET_PROMPT and assistant:
            return _get_prompt(prompt_service, assistant)

        raise InvalidActionError(INVALID_ACTION_MESSAGE)
    except RequestError as e:
        return error_envelope(str(e))
    except Exception as e:
        logger.error(f"Unhandled error in query handler: {e}", exc_info=True, extra={"action": action})
        return internal_error_envelope(e)


def _get_prompt(prompt_service: PromptService, name: str) -> JSONResponse:
    try:
        prompt = prompt_service.get_prompt(name)
    except AssistantNotFoundError as e:
        logger.info(f"Unknown assistant requested: {name}")
        return error_envelope(str(e))
    except PromptLoadError as e:
        # Cause stays in the logs
        logger.error(
            f"Could not load prompt for {name}: {e}",
            extra={"assistant": name, "template_id": e.template_id, "error_type": type(e).__name__},
        )
        return error_envelope(f"Could not load prompt for '{name}'. Check server logs.")

    return envelope(PromptResponse(assistant=name, prompt=prompt))
