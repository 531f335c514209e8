"""Message value objects — the turns that make up a chat prompt."""

from enum import StrEnum

from pydantic import BaseModel, Field


class MessageRole(StrEnum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ToolCall(BaseModel, frozen=True):
    """One tool invocation requested by the model in an assistant turn."""

    id: str
    name: str
    arguments: str = "{}"  # raw JSON string as emitted by the provider


class Message(BaseModel, frozen=True):
    """One turn of a conversation.

    tool_calls is only ever populated on assistant messages, tool_call_id only
    on tool messages.
    """

    role: MessageRole
    text: str = ""
    tool_calls: list[ToolCall] = Field(default_factory=list)
    tool_call_id: str | None = None  # set on tool messages only

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(role=MessageRole.SYSTEM, text=text)

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role=MessageRole.USER, text=text)

    @classmethod
    def assistant(cls, text: str, tool_calls: list[ToolCall] | None = None) -> "Message":
        return cls(role=MessageRole.ASSISTANT, text=text, tool_calls=tool_calls or [])

    def with_text(self, text: str) -> "Message":
        """Return a copy of this message carrying different text."""
        return self.model_copy(update={"text": text})
