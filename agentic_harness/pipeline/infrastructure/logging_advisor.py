"""LoggingAdvisor — logs the traffic passing through its position in the chain."""

from collections.abc import AsyncIterator

import structlog

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.pipeline.domain.advisor import CallChain, StreamChain


class LoggingAdvisor:
    """Pass-through advisor that logs every request and response with a label.

    The label (e.g. "[MAIN]", "[EVALUATOR]") tells apart several logging
    advisors sharing one log stream.
    """

    def __init__(self, order: int = 0, label: str = "[MAIN]") -> None:
        self._order = order
        self._label = label
        self._log = structlog.get_logger().bind(label=label)

    @property
    def name(self) -> str:
        return f"logging_advisor{self._label}"

    @property
    def order(self) -> int:
        return self._order

    async def advise_call(self, request: ChatRequest, chain: CallChain) -> ChatResponse:
        self._log_request(request)
        response = await chain.next_call(request)
        self._log_response(response)
        return response

    async def advise_stream(
        self, request: ChatRequest, chain: StreamChain
    ) -> AsyncIterator[ChatResponse]:
        self._log_request(request)
        parts: list[str] = []
        async for response in chain.next_stream(request):
            parts.append(response.text)
            yield response
        self._log.info("pipeline.stream_completed", text="".join(parts))

    def _log_request(self, request: ChatRequest) -> None:
        self._log.info(
            "pipeline.request",
            messages=[f"{m.role.name}: {m.text}" for m in request.messages],
            model=request.options.model,
            context=request.context,
        )

    def _log_response(self, response: ChatResponse) -> None:
        self._log.info(
            "pipeline.response",
            results=[g.output.text for g in response.generations],
            tool_calls=[
                call.name for g in response.generations for call in g.output.tool_calls
            ],
        )
