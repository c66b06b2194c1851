"""Built-in assistant catalog.

Order here is the order clients see in listAssistants.
"""

from app.domain.assistants.registry import AssistantEntry

DEFAULT_ASSISTANTS: tuple[AssistantEntry, ...] = (
    AssistantEntry(display_name="Item Writer", template_id="item_writer"),
    AssistantEntry(display_name="Rubric Builder", template_id="rubric_builder"),
    AssistantEntry(display_name="Lesson Planner", template_id="lesson_planner"),
    AssistantEntry(display_name="Feedback Coach", template_id="feedback_coach"),
)
