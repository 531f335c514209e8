"""AdvisorChain — ordered, immutable chain of advisors ending in a ChatModel."""

from collections.abc import AsyncIterator, Sequence

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.pipeline.domain.advisor import Advisor
from agentic_harness.pipeline.domain.errors import DuplicateAdvisorError
from agentic_harness.pipeline.domain.model import ChatModel


class AdvisorChain:
    """Passes a request through every advisor in ascending order, then the model.

    Each advisor receives a chain holding only the advisors positioned after
    it. Chains are never consumed, so an advisor may invoke its continuation
    more than once (the evaluation advisor relies on this to retry).
    Advisors with equal order keep their registration order.
    """

    def __init__(self, advisors: Sequence[Advisor], model: ChatModel) -> None:
        ordered = sorted(advisors, key=lambda advisor: advisor.order)
        seen: set[str] = set()
        for advisor in ordered:
            if advisor.name in seen:
                raise DuplicateAdvisorError(name=advisor.name)
            seen.add(advisor.name)
        self._advisors: tuple[Advisor, ...] = tuple(ordered)
        self._model = model

    @property
    def advisors(self) -> tuple[Advisor, ...]:
        return self._advisors

    async def next_call(self, request: ChatRequest) -> ChatResponse:
        if not self._advisors:
            return await self._model.call(request)
        return await self._advisors[0].advise_call(request, self._rest())

    def next_stream(self, request: ChatRequest) -> AsyncIterator[ChatResponse]:
        if not self._advisors:
            return self._model.stream(request)
        return self._advisors[0].advise_stream(request, self._rest())

    def _rest(self) -> "AdvisorChain":
        return AdvisorChain(advisors=self._advisors[1:], model=self._model)
