"""
Exception types raised by the generation and chat clients.
"""


class LearningPathError(Exception):
    """Base class for all Learning Path Copilot errors."""


class GenerationServiceError(LearningPathError):
    """The generative service could not be reached or rejected the request."""


class MalformedPathError(LearningPathError):
    """The service answered, but the payload is not a valid learning path."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class ChatSessionError(LearningPathError):
    """A chat turn failed; the session itself remains usable."""
