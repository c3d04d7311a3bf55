from typing import Any

from .base import LLMProvider
from .providers import GroqProvider, OpenAIProvider

PROVIDERS: dict[str, type[LLMProvider]] = {
    "groq": GroqProvider,
    "openai": OpenAIProvider,
}


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider by name.

    This factory hides which class backs each provider name.

    Args:
        provider: Provider name, case-insensitive ('groq' or 'openai')
        **config: Constructor arguments; ``api_key`` is always required,
            ``model`` and ``base_url`` are optional for both, ``organization``
            for OpenAI only

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If the provider name is not supported
        TypeError: If ``api_key`` is missing

    Examples:
        >>> provider = create_llm_provider("groq", api_key="gsk_...")
        >>> provider.model
        'llama-3.3-70b-versatile'
    """
    provider_cls = PROVIDERS.get(provider.lower())
    if provider_cls is None:
        supported = ", ".join(f"'{name}'" for name in PROVIDERS)
        raise ValueError(f"Unsupported provider: {provider}. Supported providers: {supported}")

    if "api_key" not in config:
        raise TypeError(f"{provider_cls.__name__} requires 'api_key' in config")
    return provider_cls(**config)
