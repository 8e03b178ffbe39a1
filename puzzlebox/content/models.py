"""Pydantic models for the content provider layer."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """Represents a single message in a generation request."""
    role: Role
    content: str


class ProviderConfig(BaseModel):
    """Settings for the LLM-backed content provider."""
    model_config = ConfigDict(extra='allow')

    model: str = "gemini/gemini-2.5-flash"
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    timeout: Optional[float] = 60.0
    # Additional kwargs are allowed and passed to LiteLLM
