"""Runtime configuration for a chat session.

Values come from command-line flags first, then the environment (a local
``.env`` file is loaded by the CLI before flags are parsed).
"""

import os

from pydantic import BaseModel, ConfigDict, Field

from .llm import ChatModel, MissingAPIKeyError

API_KEY_ENV = "OPENAI_API_KEY"


def resolve_api_key(key: str | None = None) -> str:
    """Pick the API credential.

    Args:
        key: Value given with ``--key``; wins over the environment

    Returns:
        The API key

    Raises:
        MissingAPIKeyError: If neither the flag nor OPENAI_API_KEY is set
    """
    if key:
        return key
    env_key = os.getenv(API_KEY_ENV)
    if not env_key:
        raise MissingAPIKeyError(API_KEY_ENV)
    return env_key


class ChatConfig(BaseModel):
    """Settings for one interactive session."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, description="OpenAI API key")
    model: ChatModel = Field(default_factory=ChatModel.default, description="Model to chat with")
    general: str | None = Field(
        default=None,
        description="Replacement for the default general prompt"
    )
    base_url: str | None = Field(default=None, description="Custom API base URL")

    @classmethod
    def from_options(
        cls,
        key: str | None = None,
        model: ChatModel | None = None,
        general: str | None = None,
        base_url: str | None = None,
    ) -> "ChatConfig":
        """Build the config from CLI options, falling back to the environment."""
        return cls(
            api_key=resolve_api_key(key),
            model=ChatModel.resolve(model),
            general=general,
            base_url=base_url or os.getenv("OPENAI_BASE_URL") or None,
        )
