"""Tests for the ChatClient facade."""

from agentic_harness.chat.domain.message import MessageRole
from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.pipeline.application.client import ChatClient
from tests.pipeline.fake_advisor import RecordingAdvisor
from tests.pipeline.fake_model import FakeChatModel, make_response


class TestChatClient:
    """ChatClient sends requests through its advisors to the model."""

    async def test_call_returns_model_response(self) -> None:
        client = ChatClient(model=FakeChatModel(responses=[make_response("hi")]))

        response = await client.call(ChatRequest.from_text("hello"))

        assert response.text == "hi"

    async def test_content_builds_request_with_system(self) -> None:
        model = FakeChatModel(responses=[make_response("hi")])
        client = ChatClient(model=model)

        text = await client.content("hello", system="Be terse.")

        assert text == "hi"
        roles = [m.role for m in model.requests[0].messages]
        assert roles == [MessageRole.SYSTEM, MessageRole.USER]

    async def test_stream_yields_model_chunks(self) -> None:
        client = ChatClient(model=FakeChatModel(chunks=["x", "y"]))

        texts = [r.text async for r in client.stream(ChatRequest.from_text("q"))]

        assert texts == ["x", "y"]

    def test_advisors_are_exposed_in_execution_order(self) -> None:
        client = ChatClient(
            model=FakeChatModel(),
            advisors=[RecordingAdvisor("b", 2), RecordingAdvisor("a", 1)],
        )

        assert [a.name for a in client.advisors] == ["a", "b"]
