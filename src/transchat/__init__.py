"""
Transchat: a terminal chat client for OpenAI chat completion models.

Each turn sends the whole conversation, seeded with a general prompt
(Japanese to English translation by default), and prints the reply.
"""

__version__ = "0.1.0"

from .conversation import Conversation, ask
from .llm import ChatMessage, ChatModel, LLMProvider, Role, create_llm_provider

__all__ = [
    "ChatMessage",
    "ChatModel",
    "Conversation",
    "LLMProvider",
    "Role",
    "ask",
    "create_llm_provider",
]
