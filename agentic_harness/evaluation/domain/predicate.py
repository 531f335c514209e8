"""Skip predicates — decide when a response should bypass evaluation."""

from typing import Protocol

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse


class SkipPredicate(Protocol):
    def __call__(self, request: ChatRequest, response: ChatResponse) -> bool: ...


def skip_unevaluable_response(request: ChatRequest, response: ChatResponse) -> bool:
    """Skip responses with no result and tool-calling turns.

    A tool-calling turn is not a natural-language answer the judge could score.
    """
    return response.result is None or response.has_tool_calls
