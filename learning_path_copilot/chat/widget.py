from typing import Awaitable, Callable, List, Optional
from learning_path_copilot.chat.session import AdvisorChatSession, ChatMessage, open_chat_session
from learning_path_copilot.core.errors import ChatSessionError
import logging

logger = logging.getLogger(__name__)


class ChatWidget:
    """
    Open/close/send lifecycle of the floating chat.

    A session is created on first open and reused until the widget is closed;
    closing discards the session together with its transcript. Only one send
    is in flight at a time: a send started while a reply is pending is ignored.
    """

    def __init__(self, session_factory: Callable[..., AdvisorChatSession] = open_chat_session):
        self.session_factory = session_factory
        self.session: Optional[AdvisorChatSession] = None
        self.is_open = False
        self.is_sending = False

    def open(self, lang) -> AdvisorChatSession:
        self.is_open = True
        if self.session is None:
            self.session = self.session_factory(lang)
        return self.session

    def close(self):
        self.is_open = False
        self.session = None

    @property
    def messages(self) -> List[ChatMessage]:
        if self.session is None:
            return []
        return list(self.session.messages)

    def can_send(self, text: str) -> bool:
        return bool(text and text.strip()) and self.session is not None and not self.is_sending

    def send(self, text: str) -> Awaitable[Optional[ChatMessage]]:
        """
        Send a message through the open session.

        The widget is busy (``is_sending``) as soon as this returns and stays
        busy until the returned awaitable settles.

        Usage:
            pending = widget.send("Where can I study AI?")
            # widget.is_sending is True here
            reply = await pending

        Returns:
            Awaitable resolving to the model's reply, or to None if the input
            was blank, the widget is closed, another reply is pending, or the
            turn failed (failures are logged, not raised)
        """
        if not self.can_send(text):
            if self.session is None:
                logger.warning("Chat send ignored: widget is not open")
            elif self.is_sending:
                logger.warning("Chat send ignored: a reply is still pending")
            return self._ignored()

        self.is_sending = True
        return self._deliver(self.session, text)

    async def _ignored(self) -> None:
        return None

    async def _deliver(self, session: AdvisorChatSession, text: str) -> Optional[ChatMessage]:
        try:
            return await session.send(text)
        except ChatSessionError as e:
            logger.warning(f"Chat reply dropped: {e}")
            return None
        finally:
            self.is_sending = False
