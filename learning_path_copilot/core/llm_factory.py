from typing import Any, Dict, Optional
from langchain_core.language_models import BaseChatModel
from learning_path_copilot.config import settings as config
import logging

logger = logging.getLogger(__name__)


def create_llm(
    temperature: Optional[float] = None,
    response_schema: Optional[Dict[str, Any]] = None,
) -> BaseChatModel:
    """
    Create a Gemini chat model from the current configuration.

    The API key is looked up on every call, so a key exported after startup is
    picked up by the next request.

    Args:
        temperature: Sampling temperature (defaults to LLM_TEMPERATURE)
        response_schema: When given, the model is constrained to emit JSON
            matching this schema

    Raises:
        ValueError: If the provider is unsupported or no API key is set
    """
    provider = getattr(config, 'LLM_PROVIDER', 'google').lower()
    if provider != 'google':
        raise ValueError(f"Unsupported LLM provider: {provider}")

    from langchain_google_genai import ChatGoogleGenerativeAI

    api_key = config.get_google_api_key()
    if not api_key:
        raise ValueError(
            "GOOGLE_API_KEY not set. Please set it as environment variable "
            "or in a .env file. Get your key from: https://aistudio.google.com/app/apikey"
        )

    model_name = getattr(config, 'LLM_MODEL', 'gemini-3-flash-preview')
    if temperature is None:
        temperature = getattr(config, 'LLM_TEMPERATURE', 0.2)

    kwargs: Dict[str, Any] = {
        "model": model_name,
        "temperature": temperature,
        "google_api_key": api_key,
    }
    if response_schema is not None:
        kwargs["response_mime_type"] = "application/json"
        kwargs["response_schema"] = response_schema

    logger.debug(f"Creating Gemini model {model_name} (structured={response_schema is not None})")
    return ChatGoogleGenerativeAI(**kwargs)
