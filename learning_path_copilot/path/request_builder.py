"""
Builds the schema-constrained request for one learning path generation.
"""
import copy
from dataclasses import dataclass
from typing import Any, Dict

from learning_path_copilot.path.prompts import get_path_prompt, get_path_system_instruction
from learning_path_copilot.path.schemas import LearningPathInput

STEP_REQUIRED_FIELDS = [
    "id",
    "title",
    "description",
    "duration",
    "academyName",
    "courseLink",
    "isUniversityModule",
]

PATH_REQUIRED_FIELDS = ["summary", "steps", "forwardLookingSentence"]

# Output contract sent with every generation call (Gemini response_schema format)
LEARNING_PATH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "steps": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "duration": {"type": "string"},
                    "academyName": {"type": "string"},
                    "courseLink": {"type": "string"},
                    "isUniversityModule": {"type": "boolean"},
                },
                "required": STEP_REQUIRED_FIELDS,
            },
        },
        "forwardLookingSentence": {"type": "string"},
    },
    "required": PATH_REQUIRED_FIELDS,
}


@dataclass(frozen=True)
class PathRequest:
    """Everything the generation call needs besides the model itself."""
    system_instruction: str
    prompt_text: str
    output_schema: Dict[str, Any]


def build_path_request(path_input: LearningPathInput, lang) -> PathRequest:
    """
    Turn validated form values into a generation request.

    The deadline is forwarded exactly as entered; it is not parsed here.

    Args:
        path_input: Validated form values (goal already trimmed)
        lang: Display language, which fixes the response language

    Returns:
        PathRequest with a private copy of the output schema
    """
    return PathRequest(
        system_instruction=get_path_system_instruction(lang),
        prompt_text=get_path_prompt(path_input),
        output_schema=copy.deepcopy(LEARNING_PATH_SCHEMA),
    )
