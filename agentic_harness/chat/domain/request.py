"""ChatRequest value object — an outbound prompt travelling through the pipeline."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from agentic_harness.chat.domain.message import Message, MessageRole


class ChatOptions(BaseModel, frozen=True):
    """Execution options for one model call. None means "use the model default"."""

    model: str | None = None
    temperature: float | None = Field(default=None, ge=0.0)
    max_tokens: int | None = Field(default=None, ge=1)


class ChatRequest(BaseModel, frozen=True):
    """Immutable prompt: ordered messages plus execution options.

    Pipeline stages never mutate a request; they derive new ones with
    ``augment_user_message`` or ``model_copy``.
    """

    messages: list[Message] = Field(min_length=1)
    options: ChatOptions = Field(default_factory=ChatOptions)
    context: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_text(cls, text: str, system: str | None = None) -> "ChatRequest":
        messages = [Message.system(system)] if system is not None else []
        messages.append(Message.user(text))
        return cls(messages=messages)

    @property
    def system_message(self) -> Message | None:
        """The first system message, or None when the prompt has none."""
        for message in self.messages:
            if message.role is MessageRole.SYSTEM:
                return message
        return None

    def augment_user_message(
        self, augmenter: Callable[[Message], Message]
    ) -> "ChatRequest":
        """Return a copy whose most recent user message is replaced by augmenter(it).

        Every other message keeps its position and content. When the prompt has
        no user message, augmenter is applied to an empty user message which is
        appended at the end.
        """
        messages = list(self.messages)
        for idx in range(len(messages) - 1, -1, -1):
            if messages[idx].role is MessageRole.USER:
                messages[idx] = augmenter(messages[idx])
                break
        else:
            messages.append(augmenter(Message.user("")))
        return self.model_copy(update={"messages": messages})
