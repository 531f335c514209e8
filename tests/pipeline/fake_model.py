"""FakeChatModel — in-memory ChatModel implementation for use in tests."""

from collections.abc import AsyncIterator

from agentic_harness.chat.domain.message import Message, ToolCall
from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse, Generation


def make_response(
    text: str = "The answer is 42.", tool_calls: list[ToolCall] | None = None
) -> ChatResponse:
    return ChatResponse(
        generations=[
            Generation(output=Message.assistant(text, tool_calls=tool_calls))
        ],
        model="fake-model",
    )


class FakeChatModel:
    """Satisfies the ChatModel protocol. Replays scripted responses in order.

    Once the script runs out, the last response is repeated. Every received
    request is recorded for assertions.
    """

    def __init__(
        self,
        responses: list[ChatResponse] | None = None,
        chunks: list[str] | None = None,
    ) -> None:
        self._responses = responses if responses is not None else [make_response()]
        self._chunks = chunks if chunks is not None else ["The answer ", "is 42."]
        self.requests: list[ChatRequest] = []
        self.stream_requests: list[ChatRequest] = []

    async def call(self, request: ChatRequest) -> ChatResponse:
        self.requests.append(request)
        idx = min(len(self.requests), len(self._responses)) - 1
        return self._responses[idx]

    async def stream(self, request: ChatRequest) -> AsyncIterator[ChatResponse]:
        self.stream_requests.append(request)
        for chunk in self._chunks:
            yield make_response(chunk)
