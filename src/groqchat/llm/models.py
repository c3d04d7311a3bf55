"""Provider-neutral request and response shapes."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One turn of a completion request."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class LLMResponse(BaseModel):
    """First choice of a completion, plus the metadata providers report."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text, empty when the service returned none")
    role: str = Field(default="assistant", description="Role the service assigned to the reply")
    model: str = Field(description="Model that produced the reply")
    usage: dict[str, int] | None = Field(default=None, description="Token counts, when reported")
