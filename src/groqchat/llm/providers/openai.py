from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse


def build_request(
    model: str,
    messages: list[ChatMessage],
    temperature: float | None,
    max_tokens: int | None,
    **kwargs: Any
) -> dict[str, Any]:
    """Build Chat Completions request params, omitting unset options."""
    request_params: dict[str, Any] = {
        "model": model,
        "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
        **kwargs
    }
    if temperature is not None:
        request_params["temperature"] = temperature
    if max_tokens is not None:
        request_params["max_tokens"] = max_tokens
    return request_params


def to_llm_response(completion: Any, model: str) -> LLMResponse:
    """Convert a Chat Completions result to an LLMResponse.

    Only the first choice is used.

    Raises:
        ValueError: If the completion carries no choices
    """
    if not completion.choices:
        raise ValueError("Completion returned no choices")

    message = completion.choices[0].message

    usage = None
    if completion.usage:
        usage = {
            "prompt_tokens": completion.usage.prompt_tokens,
            "completion_tokens": completion.usage.completion_tokens,
            "total_tokens": completion.usage.total_tokens
        }

    return LLMResponse(
        content=message.content or "",
        role=message.role or "assistant",
        model=completion.model or model,
        usage=usage
    )


class OpenAIProvider(LLMProvider):
    """Provider for any service speaking the OpenAI Chat Completions API.

    Hidden design decisions:
    - One ``AsyncOpenAI`` client per provider, closed with the provider
    - Wire format of requests and which parts of a result are kept
    """

    default_model = "gpt-4o-mini"

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Create the provider and its HTTP client.

        Args:
            api_key: Key sent as the bearer token
            model: Default model (None uses ``default_model``)
            base_url: API root (None uses the SDK's OpenAI endpoint)
            organization: OpenAI organization ID, if any
            **client_kwargs: Passed through to ``AsyncOpenAI`` (timeouts, retries)
        """
        # No retries: a failed request surfaces on the first attempt
        client_kwargs.setdefault("max_retries", 0)
        self._model = model or self.default_model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        target = model or self._model
        request = build_request(target, messages, temperature, max_tokens, **kwargs)
        completion = await self._client.chat.completions.create(**request)
        return to_llm_response(completion, target)

    async def close(self) -> None:
        await self._client.close()
