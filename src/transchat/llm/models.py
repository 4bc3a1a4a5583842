from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Role of a chat message sender."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

    @property
    def label(self) -> str:
        """Display name used when printing replies (e.g. 'Assistant')."""
        return self.value.capitalize()


class ChatModel(str, Enum):
    """Chat completion models accepted on the command line.

    Each member's value is the literal model name sent on the wire.
    """

    GPT_4 = "gpt-4"
    GPT_4_0314 = "gpt-4-0314"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_32K_0314 = "gpt-4-32k-0314"
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_3_5_TURBO_0301 = "gpt-3.5-turbo-0301"

    @classmethod
    def default(cls) -> "ChatModel":
        """Lowest-cost turbo variant."""
        return cls.GPT_3_5_TURBO

    @classmethod
    def resolve(cls, model: "ChatModel | str | None") -> "ChatModel":
        """Coerce a model selection, falling back to the default when absent.

        Raises:
            ValueError: If the name is not a supported model
        """
        if model is None:
            return cls.default()
        return cls(model)


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender")
    content: str = Field(description="Content of the message")
    name: str | None = Field(default=None, description="Optional author name")

    def to_wire(self) -> dict[str, Any]:
        """Convert to the chat completion request format."""
        payload: dict[str, Any] = {"role": self.role.value, "content": self.content}
        if self.name is not None:
            payload["name"] = self.name
        return payload


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    message: ChatMessage = Field(description="First choice returned by the model")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
