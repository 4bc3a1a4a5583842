"""Provider factory functions for CLI.

Hides provider construction from the command implementation.
"""

from ..config import ChatConfig
from ..llm import LLMProvider, create_llm_provider


def get_llm(config: ChatConfig) -> LLMProvider:
    """Create the chat completion provider for a session.

    Args:
        config: Validated session configuration

    Returns:
        OpenAI provider instance
    """
    return create_llm_provider(
        "openai",
        api_key=config.api_key,
        model=config.model,
        base_url=config.base_url,
    )
