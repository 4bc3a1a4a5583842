import logging
from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..errors import EmptyCompletionError
from ..models import ChatMessage, ChatModel, LLMResponse, Role

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI chat completion provider.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Authentication mechanism

    Each call is a single awaited round trip. The client is created with
    ``max_retries=0`` so a failed request surfaces on the first error, and
    with no timeout so a slow endpoint is waited on indefinitely.
    """

    def __init__(
        self,
        api_key: str,
        model: ChatModel | str | None = None,
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default model to use (None selects the cheapest turbo model)
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = ChatModel.resolve(model)
        client_kwargs.setdefault("max_retries", 0)
        client_kwargs.setdefault("timeout", None)
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> ChatModel:
        """Get the default model."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: ChatModel | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using OpenAI.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            **kwargs: Additional OpenAI-specific parameters

        Returns:
            LLMResponse with the first choice's message
        """
        model_to_use = ChatModel.resolve(model or self._model)

        request_params: dict[str, Any] = {
            "model": model_to_use.value,
            "messages": [msg.to_wire() for msg in messages],
            **kwargs
        }

        logger.debug("Requesting %s with %d messages", model_to_use.value, len(messages))
        completion = await self._client.chat.completions.create(**request_params)

        if not completion.choices:
            raise EmptyCompletionError(model_to_use.value)

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }
            logger.debug("Token usage: %s", usage)

        reply = completion.choices[0].message
        return LLMResponse(
            message=ChatMessage(role=Role(reply.role), content=reply.content or ""),
            model=completion.model,
            usage=usage
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
