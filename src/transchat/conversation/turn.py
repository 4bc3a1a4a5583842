import logging

from ..llm import ChatMessage, ChatModel, LLMProvider
from .models import Conversation

logger = logging.getLogger(__name__)


async def ask(
    provider: LLMProvider,
    conversation: Conversation,
    text: str,
    model: ChatModel | None = None,
) -> ChatMessage:
    """Run one completion step.

    Appends ``text`` as a user message, sends the whole history and returns
    the first choice's message. The reply is not appended; the caller stores
    it once it has been shown. Errors propagate with the user message already
    in the history and nothing else added.

    Args:
        provider: Provider used for the request
        conversation: Conversation state, mutated in place
        text: User input, used verbatim
        model: Model override (None uses the provider's default)

    Returns:
        The model's reply
    """
    conversation.add_user(text)
    logger.info("Sending %d messages", len(conversation))
    response = await provider.chat_completion(list(conversation.messages), model=model)
    return response.message
