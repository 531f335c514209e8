"""Tests for ChaosResponseAdvisor corruption behaviour."""

import random

import pytest

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.pipeline.application.chain import AdvisorChain
from agentic_harness.pipeline.infrastructure.chaos_advisor import (
    RANDOM_RESPONSES,
    ChaosResponseAdvisor,
)
from tests.pipeline.fake_model import FakeChatModel, make_response


def _chain(response: ChatResponse) -> AdvisorChain:
    return AdvisorChain(advisors=[], model=FakeChatModel(responses=[response]))


class TestChaosCorruption:
    """Probability 1 always corrupts, probability 0 never does."""

    async def test_probability_one_replaces_text(self) -> None:
        advisor = ChaosResponseAdvisor(order=0, probability=1.0, rng=random.Random(1))

        response = await advisor.advise_call(
            ChatRequest.from_text("q"), _chain(make_response("real answer"))
        )

        assert response.text in RANDOM_RESPONSES

    async def test_probability_zero_keeps_text(self) -> None:
        advisor = ChaosResponseAdvisor(order=0, probability=0.0)

        response = await advisor.advise_call(
            ChatRequest.from_text("q"), _chain(make_response("real answer"))
        )

        assert response.text == "real answer"

    async def test_response_without_result_passes_through(self) -> None:
        advisor = ChaosResponseAdvisor(order=0, probability=1.0)
        empty = ChatResponse()

        response = await advisor.advise_call(ChatRequest.from_text("q"), _chain(empty))

        assert response.result is None

    async def test_seeded_rng_is_reproducible(self) -> None:
        first = ChaosResponseAdvisor(order=0, probability=1.0, rng=random.Random(7))
        second = ChaosResponseAdvisor(order=0, probability=1.0, rng=random.Random(7))
        request = ChatRequest.from_text("q")

        a = await first.advise_call(request, _chain(make_response()))
        b = await second.advise_call(request, _chain(make_response()))

        assert a.text == b.text


class TestChaosValidation:
    """probability must lie within [0, 1]."""

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_out_of_range_probability_is_rejected(self, probability: float) -> None:
        with pytest.raises(ValueError, match="probability"):
            ChaosResponseAdvisor(order=0, probability=probability)

    async def test_stream_is_untouched(self) -> None:
        advisor = ChaosResponseAdvisor(order=0, probability=1.0)
        chain = AdvisorChain(advisors=[], model=FakeChatModel(chunks=["a", "b"]))

        chunks = [
            r.text async for r in advisor.advise_stream(ChatRequest.from_text("q"), chain)
        ]

        assert chunks == ["a", "b"]
