"""ChatResponse value object — the model output produced for one request."""

from pydantic import BaseModel, Field

from agentic_harness.chat.domain.message import Message


class Usage(BaseModel, frozen=True):
    """Token usage reported by the provider for a single call."""

    input_tokens: int | None = None
    output_tokens: int | None = None


class Generation(BaseModel, frozen=True):
    """One candidate produced by the model."""

    output: Message
    finish_reason: str | None = None


class ChatResponse(BaseModel, frozen=True):
    """Immutable value object capturing everything a model call returned.

    A response with no generations carries no usable result.
    """

    generations: list[Generation] = Field(default_factory=list)
    model: str | None = None
    usage: Usage | None = None

    @property
    def result(self) -> Generation | None:
        """The primary generation, or None when the model produced nothing."""
        return self.generations[0] if self.generations else None

    @property
    def has_tool_calls(self) -> bool:
        return any(g.output.tool_calls for g in self.generations)

    @property
    def text(self) -> str:
        """Text of the primary generation; empty when there is no result."""
        result = self.result
        return result.output.text if result is not None else ""

    def with_result_text(self, text: str) -> "ChatResponse":
        """Return a copy whose primary generation carries different text."""
        result = self.result
        if result is None:
            return self
        replaced = result.model_copy(update={"output": result.output.with_text(text)})
        return self.model_copy(
            update={"generations": [replaced, *self.generations[1:]]}
        )
