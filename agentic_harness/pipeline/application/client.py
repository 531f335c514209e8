"""ChatClient — entry point that sends requests through an advisor chain."""

from collections.abc import AsyncIterator, Sequence

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.pipeline.application.chain import AdvisorChain
from agentic_harness.pipeline.domain.advisor import Advisor
from agentic_harness.pipeline.domain.model import ChatModel


class ChatClient:
    """Thin facade over an AdvisorChain.

    Safe to share across concurrent calls: neither the client nor the chain
    holds per-call state.
    """

    def __init__(self, model: ChatModel, advisors: Sequence[Advisor] = ()) -> None:
        self._chain = AdvisorChain(advisors=advisors, model=model)

    @property
    def advisors(self) -> tuple[Advisor, ...]:
        return self._chain.advisors

    async def call(self, request: ChatRequest) -> ChatResponse:
        return await self._chain.next_call(request)

    def stream(self, request: ChatRequest) -> AsyncIterator[ChatResponse]:
        return self._chain.next_stream(request)

    async def content(self, text: str, system: str | None = None) -> str:
        """Send a single user question and return the text of the primary result."""
        response = await self.call(ChatRequest.from_text(text, system=system))
        return response.text
