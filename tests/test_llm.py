"""Unit tests for the llm module."""
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from groqchat.llm import (
    ChatMessage,
    GroqProvider,
    LLMProvider,
    LLMResponse,
    OpenAIProvider,
    create_llm_provider,
)
from groqchat.llm.providers.groq import GROQ_BASE_URL, GROQ_DEFAULT_MODEL


def make_completion(content="hi there", role="assistant", model="llama-3.3-70b-versatile", choices=1):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(message=SimpleNamespace(role=role, content=content))
            for _ in range(choices)
        ],
        usage=SimpleNamespace(prompt_tokens=3, completion_tokens=2, total_tokens=5),
        model=model,
    )


def with_mock_client(provider, completion):
    provider._client = Mock()
    provider._client.chat.completions.create = AsyncMock(return_value=completion)
    provider._client.close = AsyncMock()
    return provider._client.chat.completions.create


class TestLLMProviderInterface:
    """Tests for the abstract LLMProvider interface."""

    def test_provider_is_abstract(self):
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


class TestModels:
    """Tests for request/response models."""

    def test_response_role_defaults_to_assistant(self):
        response = LLMResponse(content="x", model="m")
        assert response.role == "assistant"
        assert response.usage is None

    def test_chat_message_is_frozen(self):
        message = ChatMessage(role="user", content="hi")
        with pytest.raises(ValueError):
            message.content = "changed"  # type: ignore


class TestGroqProvider:
    """Tests for GroqProvider."""

    def test_defaults(self):
        provider = GroqProvider(api_key="fake-key")

        assert provider.model == GROQ_DEFAULT_MODEL
        assert str(provider._client.base_url).rstrip("/") == GROQ_BASE_URL

    @pytest.mark.asyncio
    async def test_sends_messages_and_model(self):
        provider = GroqProvider(api_key="fake-key")
        create = with_mock_client(provider, make_completion())

        await provider.chat_completion([ChatMessage(role="user", content="hi")])

        create.assert_awaited_once_with(
            model=GROQ_DEFAULT_MODEL,
            messages=[{"role": "user", "content": "hi"}],
        )

    @pytest.mark.asyncio
    async def test_uses_first_choice(self):
        provider = GroqProvider(api_key="fake-key")
        completion = make_completion(choices=2)
        completion.choices[1].message.content = "second"
        with_mock_client(provider, completion)

        response = await provider.chat_completion([ChatMessage(role="user", content="hi")])

        assert response.content == "hi there"
        assert response.role == "assistant"
        assert response.usage == {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5}

    @pytest.mark.asyncio
    async def test_optional_parameters_are_forwarded(self):
        provider = GroqProvider(api_key="fake-key")
        create = with_mock_client(provider, make_completion())

        await provider.chat_completion(
            [ChatMessage(role="user", content="hi")],
            model="other-model",
            temperature=0.2,
            max_tokens=50,
        )

        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "other-model"
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 50

    @pytest.mark.asyncio
    async def test_no_choices_raises(self):
        provider = GroqProvider(api_key="fake-key")
        with_mock_client(provider, make_completion(choices=0))

        with pytest.raises(ValueError, match="no choices"):
            await provider.chat_completion([ChatMessage(role="user", content="hi")])

    @pytest.mark.asyncio
    async def test_none_content_becomes_empty(self):
        provider = GroqProvider(api_key="fake-key")
        with_mock_client(provider, make_completion(content=None))

        response = await provider.chat_completion([ChatMessage(role="user", content="hi")])

        assert response.content == ""

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self):
        provider = GroqProvider(api_key="fake-key")
        with_mock_client(provider, make_completion())

        async with provider:
            pass

        provider._client.close.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_chat_completion_real_api(self, api_keys):
        """Integration test: one completion against the real API."""
        if not api_keys["groq"]:
            pytest.skip("GROQ_API_KEY not set")

        async with GroqProvider(api_key=api_keys["groq"]) as provider:
            response = await provider.chat_completion(
                [ChatMessage(role="user", content="Reply with the word: pong")]
            )

        assert response.content
        assert response.role == "assistant"


class TestOpenAIProvider:
    """Tests for OpenAIProvider."""

    @pytest.mark.asyncio
    async def test_uses_default_model(self):
        provider = OpenAIProvider(api_key="fake-key", model="gpt-4o-mini")
        create = with_mock_client(provider, make_completion(model="gpt-4o-mini"))

        response = await provider.chat_completion([ChatMessage(role="user", content="hi")])

        assert create.await_args.kwargs["model"] == "gpt-4o-mini"
        assert response.model == "gpt-4o-mini"

    def test_client_does_not_retry(self):
        assert OpenAIProvider(api_key="fake-key")._client.max_retries == 0
        assert GroqProvider(api_key="fake-key")._client.max_retries == 0

    def test_retries_can_be_requested(self):
        provider = OpenAIProvider(api_key="fake-key", max_retries=3)
        assert provider._client.max_retries == 3


class TestLLMFactory:
    """Tests for create_llm_provider."""

    def test_create_groq_provider(self):
        provider = create_llm_provider("groq", api_key="test-key", model="llama-3.1-8b-instant")

        assert isinstance(provider, GroqProvider)
        assert provider.model == "llama-3.1-8b-instant"

    def test_create_openai_provider(self):
        assert isinstance(create_llm_provider("OpenAI", api_key="test-key"), OpenAIProvider)

    def test_create_provider_unknown_type(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("unknown", api_key="test-key")

    def test_create_provider_missing_api_key(self):
        with pytest.raises(TypeError, match="requires 'api_key'"):
            create_llm_provider("groq")

    @given(st.text(min_size=1))
    def test_factory_with_random_provider_names(self, provider_name: str):
        """Property test: Factory should only accept known providers."""
        if provider_name.lower() in ("groq", "openai"):
            provider = create_llm_provider(provider_name, api_key="fake")
            assert isinstance(provider, LLMProvider)
        else:
            with pytest.raises(ValueError):
                create_llm_provider(provider_name, api_key="fake")
