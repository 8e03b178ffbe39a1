from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role


class LLMClient(BaseModel):
    """
    Client for one-shot content generation via LiteLLM.

    Each request is a fresh system + user exchange; generation calls do not
    share conversation history.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    timeout: Optional[float] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the pending request.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        """Clear all messages."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        return self.messages.copy()

    def completion(self, **kwargs: Any) -> Any:
        """
        Send the pending messages to the model.

        Args:
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        if self.timeout is not None:
            params.setdefault("timeout", self.timeout)

        return litellm.completion(**params)

    def generate(self, system: str, prompt: str, **kwargs: Any) -> str:
        """
        Run a single system + user exchange and return the response text.

        Args:
            system: System prompt
            prompt: User prompt
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The assistant message content ("" if the model returned none)
        """
        self.clear_messages()
        self.add_message("system", system)
        self.add_message("user", prompt)
        response = self.completion(**kwargs)
        content = response.choices[0].message.content or ""
        self.add_message("assistant", content)
        return content
