from typing import Callable
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from learning_path_copilot.config import settings as config
from learning_path_copilot.core.errors import GenerationServiceError
from learning_path_copilot.core.llm_factory import create_llm
from learning_path_copilot.core.llm_utils import extract_content_as_string
from learning_path_copilot.path.parsers import parse_learning_path
from learning_path_copilot.path.request_builder import build_path_request
from learning_path_copilot.path.schemas import LearningPath, LearningPathInput
import logging

logger = logging.getLogger(__name__)


class PathGenerator:
    """
    Generates a learning path with a single structured-output call.

    No retries, no streaming and no caching: two identical inputs produce two
    independent calls. Either a fully validated LearningPath is returned or
    the call fails as a whole.
    """

    def __init__(self, llm_factory: Callable[..., BaseChatModel] = create_llm):
        """
        Initialize the generator.

        Args:
            llm_factory: Callable returning a chat model; receives the
                response_schema keyword. Called once per generation so the
                API key is read at call time.
        """
        self.llm_factory = llm_factory

    async def generate(self, path_input: LearningPathInput, lang) -> LearningPath:
        """
        Request a learning path for one learner.

        Args:
            path_input: Validated form values
            lang: Display language ("en" or "ar")

        Returns:
            Validated LearningPath

        Raises:
            GenerationServiceError: Transport, quota or credential failure
            MalformedPathError: The response is not a valid learning path
        """
        request = build_path_request(path_input, lang)
        messages = [
            SystemMessage(content=request.system_instruction),
            HumanMessage(content=request.prompt_text),
        ]

        logger.info(f"Generating learning path: goal={path_input.goal!r}, level={path_input.level.value}")
        try:
            llm = self.llm_factory(response_schema=request.output_schema)
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"Learning path generation failed: {e}")
            raise GenerationServiceError(str(e) or config.DEFAULT_ERROR_MESSAGE) from e

        path = parse_learning_path(extract_content_as_string(response))
        logger.info(f"Received learning path with {len(path.steps)} step(s)")
        return path
