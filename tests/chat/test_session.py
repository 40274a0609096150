"""
Tests for chat/session.py - Multi-turn advisor session
"""
import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from learning_path_copilot.chat.session import AdvisorChatSession, ChatMessage, open_chat_session
from learning_path_copilot.core.errors import ChatSessionError


def reply(text):
    response = MagicMock()
    response.content = text
    return response


@pytest.fixture
def chat_llm():
    """Mock model that echoes the last human message"""
    llm = MagicMock()

    async def echo(messages):
        return reply(f"echo: {messages[-1].content}")

    llm.ainvoke = AsyncMock(side_effect=echo)
    return llm


class TestOpenSession:
    """Test session creation"""

    def test_open_sets_language_instruction(self, chat_llm):
        session = open_chat_session("ar", llm_factory=lambda: chat_llm)

        assert session.lang == "ar"
        assert "Arabic" in session.system_instruction
        assert session.messages == []
        assert session.session_id

    def test_model_created_lazily(self):
        factory = MagicMock()
        open_chat_session("en", llm_factory=factory)
        factory.assert_not_called()

    def test_sessions_have_distinct_ids(self, chat_llm):
        first = open_chat_session("en", llm_factory=lambda: chat_llm)
        second = open_chat_session("en", llm_factory=lambda: chat_llm)
        assert first.session_id != second.session_id


class TestSend:
    """Test sending messages"""

    @pytest.mark.asyncio
    async def test_send_appends_user_then_model(self, chat_llm):
        session = AdvisorChatSession("ar", llm_factory=lambda: chat_llm)

        answer = await session.send("مرحبا")

        assert answer == ChatMessage(role="model", text="echo: مرحبا")
        assert [m.role for m in session.messages] == ["user", "model"]
        assert session.messages[0].text == "مرحبا"

    @pytest.mark.asyncio
    async def test_context_sent_to_model(self, chat_llm):
        session = AdvisorChatSession("en", llm_factory=lambda: chat_llm)

        await session.send("Which university for AI?")
        await session.send("And for networks?")

        messages = chat_llm.ainvoke.call_args[0][0]
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert isinstance(messages[2], AIMessage)
        assert messages[1].content == "Which university for AI?"
        assert messages[2].content == "echo: Which university for AI?"
        assert messages[3].content == "And for networks?"
        assert session.turn_count == 2

    @pytest.mark.asyncio
    async def test_model_created_once(self, chat_llm):
        factory = MagicMock(return_value=chat_llm)
        session = AdvisorChatSession("en", llm_factory=factory)

        await session.send("one")
        await session.send("two")

        factory.assert_called_once()

    @pytest.mark.asyncio
    async def test_blank_message_rejected(self, chat_llm):
        session = AdvisorChatSession("en", llm_factory=lambda: chat_llm)

        with pytest.raises(ValueError):
            await session.send("   ")

        chat_llm.ainvoke.assert_not_called()
        assert session.messages == []

    @pytest.mark.asyncio
    async def test_failed_turn(self, chat_llm):
        """A failure keeps the user message visible but out of the model context"""
        session = AdvisorChatSession("en", llm_factory=lambda: chat_llm)
        chat_llm.ainvoke.side_effect = ConnectionError("timeout")

        with pytest.raises(ChatSessionError):
            await session.send("Hello")

        assert [m.role for m in session.messages] == ["user"]
        assert session.turn_count == 0

        async def echo(messages):
            return reply(f"echo: {messages[-1].content}")

        chat_llm.ainvoke.side_effect = echo
        await session.send("Hello again")

        context = chat_llm.ainvoke.call_args[0][0]
        assert [m.content for m in context[1:]] == ["Hello again"]

    @pytest.mark.asyncio
    async def test_concurrent_sends_keep_order(self):
        """Two rapid sends are processed in submission order, never interleaved"""
        llm = MagicMock()

        async def slow_then_fast(messages):
            text = messages[-1].content
            # The first message takes longer; it must still finish first
            await asyncio.sleep(0.05 if text == "first" else 0)
            return reply(f"re: {text}")

        llm.ainvoke = AsyncMock(side_effect=slow_then_fast)
        session = AdvisorChatSession("en", llm_factory=lambda: llm)

        await asyncio.gather(session.send("first"), session.send("second"))

        assert [(m.role, m.text) for m in session.messages] == [
            ("user", "first"),
            ("model", "re: first"),
            ("user", "second"),
            ("model", "re: second"),
        ]

    @pytest.mark.asyncio
    async def test_language_locked_to_session(self, chat_llm):
        session = AdvisorChatSession("en", llm_factory=lambda: chat_llm)

        await session.send("hello")

        system = chat_llm.ainvoke.call_args[0][0][0]
        assert "English" in system.content
