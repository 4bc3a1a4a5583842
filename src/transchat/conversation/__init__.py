"""Conversation state and the completion step for the chat loop."""

from .models import Conversation
from .turn import ask

__all__ = ["Conversation", "ask"]
