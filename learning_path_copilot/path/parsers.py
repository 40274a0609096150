"""
Decoding of generation responses into LearningPath.

Nothing the model returns reaches the view-state without passing
parse_learning_path().
"""
import json
import logging

from pydantic import ValidationError

from learning_path_copilot.core.errors import MalformedPathError
from learning_path_copilot.core.llm_utils import strip_code_fence
from learning_path_copilot.path.schemas import LearningPath

logger = logging.getLogger(__name__)


def decode_payload(text: str) -> dict:
    """
    Decode the raw response body into a JSON object.

    An empty or missing body decodes as {} (which then fails validation in
    parse_learning_path rather than crashing the decoder).

    Raises:
        MalformedPathError: If the body is not JSON or not a JSON object
    """
    body = strip_code_fence(text or "").strip() or "{}"
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedPathError(f"Response is not valid JSON: {e.msg}", raw_text=text or "") from e

    if not isinstance(payload, dict):
        raise MalformedPathError(
            f"Expected a JSON object, got {type(payload).__name__}", raw_text=text or ""
        )
    return payload


def parse_learning_path(text: str) -> LearningPath:
    """
    Decode and validate a generation response.

    Args:
        text: Response content as returned by the model

    Returns:
        Fully validated LearningPath

    Raises:
        MalformedPathError: If the payload is not JSON or misses required fields
    """
    payload = decode_payload(text)
    try:
        return LearningPath.model_validate(payload)
    except ValidationError as e:
        # Model-level errors (duplicate ids) have an empty location
        fields = sorted({".".join(str(part) for part in err["loc"]) or "path" for err in e.errors()})
        logger.warning(f"Learning path failed validation on: {', '.join(fields)}")
        raise MalformedPathError(
            f"Learning path is incomplete or invalid ({', '.join(fields)})", raw_text=text or ""
        ) from e
