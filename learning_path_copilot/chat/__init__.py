"""
Career concierge chat: the multi-turn session and the widget controller.
"""

from learning_path_copilot.chat.session import ChatMessage, AdvisorChatSession, open_chat_session
from learning_path_copilot.chat.widget import ChatWidget

__all__ = [
    "ChatMessage",
    "AdvisorChatSession",
    "open_chat_session",
    "ChatWidget",
]
