"""Tests for the default skip predicate."""

from agentic_harness.chat.domain.message import ToolCall
from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.evaluation.domain.predicate import skip_unevaluable_response
from tests.pipeline.fake_model import make_response


class TestSkipUnevaluableResponse:
    """Responses without a result or with tool calls are not evaluated."""

    def test_plain_answer_is_evaluated(self) -> None:
        request = ChatRequest.from_text("q")

        assert skip_unevaluable_response(request, make_response("a")) is False

    def test_missing_result_is_skipped(self) -> None:
        request = ChatRequest.from_text("q")

        assert skip_unevaluable_response(request, ChatResponse()) is True

    def test_tool_call_is_skipped(self) -> None:
        request = ChatRequest.from_text("q")
        response = make_response("", tool_calls=[ToolCall(id="1", name="search")])

        assert skip_unevaluable_response(request, response) is True

    def test_empty_text_answer_is_still_evaluated(self) -> None:
        request = ChatRequest.from_text("q")

        assert skip_unevaluable_response(request, make_response("")) is False
