from typing import Any

from .openai import OpenAIProvider

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_DEFAULT_MODEL = "llama-3.3-70b-versatile"


class GroqProvider(OpenAIProvider):
    """Groq through its OpenAI-compatible endpoint.

    Only the endpoint and default model differ from OpenAI; requests and
    responses go through the same Chat Completions code.
    """

    default_model = GROQ_DEFAULT_MODEL

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str = GROQ_BASE_URL,
        **client_kwargs: Any
    ):
        """Create the provider.

        Args:
            api_key: Groq API key (``gsk_...``)
            model: Default model (None uses ``llama-3.3-70b-versatile``)
            base_url: Groq API root
            **client_kwargs: Passed through to ``AsyncOpenAI``
        """
        super().__init__(api_key, model=model, base_url=base_url, **client_kwargs)
