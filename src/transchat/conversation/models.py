"""Conversation state for a single chat session.

The history is the exact payload sent on every request, so it is only ever
appended to or replaced wholesale by the startup snapshot.
"""

from typing import Any

from pydantic import BaseModel, Field

from ..llm import ChatMessage, Role
from ..prompts import COMMAND_INSTRUCTIONS, get_general_prompt


class Conversation(BaseModel):
    """Ordered, role-tagged message history seeded with system instructions."""

    initial_state: tuple[ChatMessage, ...] = Field(
        description="Snapshot of the seed messages taken at startup"
    )
    messages: list[ChatMessage] = Field(
        default_factory=list,
        description="History in chronological order"
    )

    def model_post_init(self, __context: Any) -> None:
        if not self.messages:
            self.messages = list(self.initial_state)

    @classmethod
    def from_prompt(cls, general: str | None = None) -> "Conversation":
        """Build a conversation seeded with the general prompt and command help.

        Args:
            general: Replacement for the default general prompt

        Returns:
            Conversation whose history holds the four seed system messages
        """
        seed = [ChatMessage(role=Role.SYSTEM, content=general if general is not None else get_general_prompt())]
        seed.extend(ChatMessage(role=Role.SYSTEM, content=text) for text in COMMAND_INSTRUCTIONS)
        return cls(initial_state=tuple(seed))

    def add(self, message: ChatMessage) -> None:
        """Append a message to the history."""
        self.messages.append(message)

    def add_user(self, content: str) -> ChatMessage:
        """Append a user turn and return the new message."""
        message = ChatMessage(role=Role.USER, content=content)
        self.add(message)
        return message

    def reset(self) -> None:
        """Replace the history with the startup snapshot."""
        self.messages = list(self.initial_state)

    def __len__(self) -> int:
        return len(self.messages)
