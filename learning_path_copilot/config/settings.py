"""
Configuration module for Learning Path Copilot.

Values come from environment variables (optionally loaded from a .env file).
The API key is not captured at import time; it is read on every call through
get_google_api_key().
"""
import os
from typing import Optional

# Load environment variables from .env file (if present)
# This must happen before any os.getenv() calls
from dotenv import load_dotenv

load_dotenv()

# --- Model Configuration ---
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "google")
LLM_MODEL = os.getenv("LLM_MODEL", "gemini-3-flash-preview")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
CHAT_TEMPERATURE = float(os.getenv("CHAT_TEMPERATURE", "0.7"))

# --- Form Configuration ---
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
DEFAULT_AVAILABILITY = int(os.getenv("DEFAULT_AVAILABILITY", "10"))
MIN_AVAILABILITY = 1
MAX_AVAILABILITY = 40

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Server Configuration ---
GRADIO_SERVER_NAME = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
GRADIO_SERVER_PORT = int(os.getenv("GRADIO_SERVER_PORT", "7860"))

DEFAULT_ERROR_MESSAGE = "System unavailable. Please retry shortly."


def get_google_api_key() -> Optional[str]:
    """
    Read the Gemini API key from the environment.

    Priority:
    1. GOOGLE_API_KEY
    2. API_KEY (name used by the hosted AI Studio template)
    """
    return os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY")
