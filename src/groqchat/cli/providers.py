"""Environment-driven construction of the store and LLM provider.

Commands ask for ready objects; which variables are read, and what happens
when they are missing, stays in this module.
"""

import os

import typer
from rich.console import Console

from ..llm import LLMProvider, create_llm_provider
from ..llm.providers.groq import GROQ_DEFAULT_MODEL
from ..store import MessageStore, create_storage

_console = Console()

# provider name -> (api key variable, model variable, default model)
PROVIDER_ENV = {
    "groq": ("GROQ_API_KEY", "GROQ_MODEL", GROQ_DEFAULT_MODEL),
    "openai": ("OPENAI_API_KEY", "OPENAI_CHAT_MODEL", "gpt-4o-mini"),
}


def get_store() -> MessageStore:
    """Message store over the JSON file named by GROQCHAT_STORAGE_PATH.

    Falls back to ``~/.groqchat/storage.json`` when the variable is unset.
    """
    return MessageStore(create_storage("file", path=os.getenv("GROQCHAT_STORAGE_PATH")))


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Build the configured LLM provider, or None with a printed reason.

    Environment variables:
        LLM_PROVIDER: groq (default) or openai
        GROQ_API_KEY, GROQ_MODEL: Groq credentials and model
        OPENAI_API_KEY, OPENAI_CHAT_MODEL: OpenAI credentials and model
        OPENAI_BASE_URL: Any OpenAI-compatible endpoint (openai only)
    """
    out = console or _console
    name = os.getenv("LLM_PROVIDER", "groq").lower()

    if name not in PROVIDER_ENV:
        out.print(f"[red]Error: Unknown LLM provider: {name}[/red]")
        return None

    key_var, model_var, default_model = PROVIDER_ENV[name]
    api_key = os.getenv(key_var)
    if not api_key:
        out.print(f"[yellow]Warning: {key_var} not set[/yellow]")
        return None

    config = {"api_key": api_key, "model": os.getenv(model_var, default_model)}
    if name == "openai":
        config["base_url"] = os.getenv("OPENAI_BASE_URL")
    return create_llm_provider(name, **config)


def require_llm(console: Console | None = None) -> LLMProvider:
    """Like get_llm, but exits with status 1 when nothing is configured.

    Raises:
        typer.Exit: If the provider cannot be built
    """
    out = console or _console
    llm = get_llm(out)
    if llm is None:
        out.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
