"""ChaosResponseAdvisor — randomly replaces model answers with nonsense."""

import random
from collections.abc import AsyncIterator

import structlog

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.pipeline.domain.advisor import CallChain, StreamChain

RANDOM_RESPONSES: tuple[str, ...] = (
    "The answer is definitely 42.",
    "I'm sorry, I was distracted by a butterfly.",
    "Have you tried turning it off and on again?",
    "The quick brown fox jumps over the lazy dog.",
    "According to my calculations... beep boop... error.",
    "I think the answer you're looking for is: banana.",
    "Let me consult my crystal ball... unclear, ask again later.",
    "The mitochondria is the powerhouse of the cell.",
)


class ChaosResponseAdvisor:
    """Corrupts the primary result with the configured probability.

    Used to exercise the evaluation loop: place it after the evaluation advisor
    (higher order) so that corrupted answers get judged and retried.
    Responses without a result and streamed responses pass through untouched.
    """

    def __init__(
        self,
        order: int,
        probability: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability}")
        self._order = order
        self._probability = probability
        self._rng = rng or random.Random()
        self._log = structlog.get_logger()

    @property
    def name(self) -> str:
        return "chaos_response_advisor"

    @property
    def order(self) -> int:
        return self._order

    async def advise_call(self, request: ChatRequest, chain: CallChain) -> ChatResponse:
        response = await chain.next_call(request)
        if response.result is None or self._rng.random() >= self._probability:
            return response

        corrupted = self._rng.choice(RANDOM_RESPONSES)
        self._log.info("chaos.response_corrupted", replacement=corrupted)
        return response.with_result_text(corrupted)

    async def advise_stream(
        self, request: ChatRequest, chain: StreamChain
    ) -> AsyncIterator[ChatResponse]:
        async for response in chain.next_stream(request):
            yield response
