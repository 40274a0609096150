import asyncio
import uuid
from datetime import datetime
from typing import Callable, List, Literal, Optional
from pydantic import BaseModel
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from learning_path_copilot.config import settings as config
from learning_path_copilot.core.errors import ChatSessionError
from learning_path_copilot.core.llm_factory import create_llm
from learning_path_copilot.core.llm_utils import extract_content_as_string
from learning_path_copilot.path.prompts import get_chat_system_instruction
import logging

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    """One entry of the chat transcript."""
    role: Literal["user", "model"]
    text: str


def _create_chat_llm() -> BaseChatModel:
    return create_llm(temperature=config.CHAT_TEMPERATURE)


class AdvisorChatSession:
    """
    Stateful multi-turn conversation with the MARI advisor.

    The response language is fixed when the session is opened; changing the
    display language afterwards requires opening a new session. Sends are
    serialized, so turns reach the model (and the transcript) in the order
    they were submitted.
    """

    def __init__(self, lang, llm_factory: Callable[[], BaseChatModel] = _create_chat_llm):
        self.lang = lang
        self.system_instruction = get_chat_system_instruction(lang)
        self.session_id = str(uuid.uuid4())
        self.created_at = datetime.now()
        self.messages: List[ChatMessage] = []
        self.llm_factory = llm_factory
        self._llm: Optional[BaseChatModel] = None
        self._history: List[BaseMessage] = [SystemMessage(content=self.system_instruction)]
        self._lock = asyncio.Lock()

    @property
    def turn_count(self) -> int:
        """Number of completed user/model exchanges in the model context."""
        return (len(self._history) - 1) // 2

    def _get_llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self.llm_factory()
        return self._llm

    async def send(self, text: str) -> ChatMessage:
        """
        Send one user message and wait for the model's reply.

        The user message is appended to the transcript when this send's turn
        starts. Only completed exchanges enter the model context; a failed
        turn leaves the user message visible and the context unchanged.

        Raises:
            ValueError: If the message is blank
            ChatSessionError: If the model call fails
        """
        if not text or not text.strip():
            raise ValueError("Chat message must not be empty")
        text = text.strip()

        async with self._lock:
            self.messages.append(ChatMessage(role="user", text=text))
            turn = self._history + [HumanMessage(content=text)]
            try:
                response = await self._get_llm().ainvoke(turn)
            except Exception as e:
                logger.error(f"Chat turn failed in session {self.session_id}: {e}")
                raise ChatSessionError(str(e) or config.DEFAULT_ERROR_MESSAGE) from e

            reply_text = extract_content_as_string(response)
            self._history = turn + [AIMessage(content=reply_text)]
            reply = ChatMessage(role="model", text=reply_text)
            self.messages.append(reply)
            return reply


def open_chat_session(lang, llm_factory: Optional[Callable[[], BaseChatModel]] = None) -> AdvisorChatSession:
    """
    Open a new advisor session configured for the given language.

    The model itself is created on the first send, so a missing API key shows
    up as a failed turn.
    """
    session = AdvisorChatSession(lang, llm_factory=llm_factory or _create_chat_llm)
    logger.info(f"Opened chat session {session.session_id} (lang={getattr(lang, 'value', lang)})")
    return session
