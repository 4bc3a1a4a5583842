from .base import LLMProvider
from .errors import EmptyCompletionError, MissingAPIKeyError, TranschatError
from .factory import create_llm_provider
from .models import ChatMessage, ChatModel, LLMResponse, Role
from .providers import OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "ChatModel",
    "LLMResponse",
    "Role",
    "OpenAIProvider",
    "TranschatError",
    "EmptyCompletionError",
    "MissingAPIKeyError",
]
