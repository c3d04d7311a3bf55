"""Unit tests for the chat controller."""
import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from groqchat.chat import CLEAR_PROMPT, ERROR_MESSAGE, ChatController, ChatState, CompletionClient, Message
from groqchat.store import InMemoryStorage, MessageStore

from .conftest import FakeProvider


async def yes(prompt: str) -> bool:
    return True


async def no(prompt: str) -> bool:
    return False


class TestChatState:
    """Tests for the immutable chat state."""

    def test_append_returns_new_state(self):
        state = ChatState()
        message = Message.user("hi")

        new_state = state.append(message)

        assert state.history == ()
        assert new_state.history == (message,)

    def test_last_response(self):
        state = ChatState().append(Message.user("a")).append(Message.assistant("b")).append(Message.user("c"))
        assert state.last_response().content == "b"
        assert ChatState().last_response() is None


class TestSubmit:
    """Tests for ChatController.submit."""

    @pytest.mark.asyncio
    async def test_success_adds_user_then_assistant(self, controller, store):
        reply = await controller.submit("hi")

        assert reply.content == "hello"
        persisted = store.load()
        assert [(m.role, m.content) for m in persisted] == [("user", "hi"), ("assistant", "hello")]
        assert list(controller.history) == persisted

    @pytest.mark.asyncio
    async def test_two_sends_keep_order(self, controller, store):
        await controller.submit("hi")
        await controller.submit("there")

        assert [(m.role, m.content) for m in store.load()] == [
            ("user", "hi"),
            ("assistant", "hello"),
            ("user", "there"),
            ("assistant", "hello"),
        ]

    @pytest.mark.asyncio
    async def test_failure_still_adds_two_messages(self, store, failing_provider, view):
        controller = ChatController(store, CompletionClient(failing_provider))
        controller.attach(view)

        await controller.submit("hi")

        persisted = store.load()
        assert len(persisted) == 2
        assert persisted[1].role == "assistant"
        assert persisted[1].content == ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_input_is_trimmed(self, controller, store):
        await controller.submit("  hi \n")
        assert store.load()[0].content == "hi"

    @given(st.text(alphabet=" \t\n\r\x0b\x0c", max_size=10))
    def test_whitespace_is_a_no_op(self, text):
        """Property test: blank input never sends or records anything."""
        provider = FakeProvider()
        store = MessageStore(InMemoryStorage())
        controller = ChatController(store, CompletionClient(provider))

        assert asyncio.run(controller.submit(text)) is None
        assert provider.calls == []
        assert store.load() == []
        assert controller.history == ()

    @pytest.mark.asyncio
    async def test_user_message_persisted_before_request(self, store, view):
        seen = {}

        class InspectingProvider(FakeProvider):
            async def chat_completion(self, messages, **kwargs):
                seen["persisted"] = [m.content for m in store.load()]
                seen["busy"] = controller.busy
                seen["busy_changes"] = list(view.busy_changes)
                return await super().chat_completion(messages, **kwargs)

        controller = ChatController(store, CompletionClient(InspectingProvider()))
        controller.attach(view)

        await controller.submit("hi")

        assert seen["persisted"] == ["hi"]
        assert seen["busy"] is True
        assert seen["busy_changes"][-1] is True
        assert controller.busy is False

    @pytest.mark.asyncio
    async def test_view_rendered_after_each_mutation(self, controller, view):
        await controller.submit("hi")

        # initial attach, user message, reply
        assert [len(r) for r in view.renders] == [0, 1, 2]
        assert view.busy_changes == [False, True, False]

    @pytest.mark.asyncio
    async def test_submit_while_busy_is_ignored(self, controller):
        controller._state = controller.state.with_awaiting(True)

        assert controller.can_submit("hi") is False
        assert await controller.submit("hi") is None
        assert controller.history == ()

    def test_can_submit(self, controller):
        assert controller.can_submit("hi")
        assert not controller.can_submit("   ")
        assert not controller.can_submit("")

    @pytest.mark.asyncio
    async def test_save_failure_notifies(self, client, view):
        class BrokenStorage(InMemoryStorage):
            def set_item(self, key, value):
                raise OSError("read-only")

        controller = ChatController(MessageStore(BrokenStorage()), client)
        controller.attach(view)

        await controller.submit("hi")

        assert len(controller.history) == 2
        assert ("warning", "Could not save chat history") in view.notices

    def test_loads_persisted_history(self, store, client):
        history = [Message.user("a"), Message.assistant("b")]
        store.save(history)

        assert list(ChatController(store, client).history) == history


class TestClear:
    """Tests for ChatController.clear."""

    @pytest.mark.asyncio
    async def test_confirmed_clear_empties_everything(self, controller, store, view):
        await controller.submit("hi")

        assert await controller.clear(yes) is True
        assert store.load() == []
        assert controller.history == ()
        assert view.renders[-1] == []

    @pytest.mark.asyncio
    async def test_declined_clear_keeps_history(self, controller, store):
        await controller.submit("hi")
        before = store.load()

        assert await controller.clear(no) is False
        assert store.load() == before
        assert list(controller.history) == before

    @pytest.mark.asyncio
    async def test_prompt_text(self, controller):
        prompts = []

        async def record(prompt):
            prompts.append(prompt)
            return False

        await controller.clear(record)

        assert prompts == [CLEAR_PROMPT]

    @pytest.mark.asyncio
    async def test_clear_refused_while_busy(self, controller, view):
        controller._state = controller.state.with_awaiting(True)
        prompts = []

        async def record(prompt):
            prompts.append(prompt)
            return True

        assert await controller.clear(record) is False
        assert prompts == []
        assert view.notices and view.notices[-1][0] == "warning"
