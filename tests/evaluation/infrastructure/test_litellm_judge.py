"""Tests for LiteLLMJudgeClient infrastructure implementation."""

from unittest.mock import AsyncMock, MagicMock, patch

import litellm
import pytest

from agentic_harness.config.domain.judge import JudgeConfig
from agentic_harness.evaluation.domain.judge import JudgeClientFactory
from agentic_harness.evaluation.domain.result import EvaluationResult
from agentic_harness.evaluation.infrastructure.errors import JudgeInvocationError
from agentic_harness.evaluation.infrastructure.litellm_judge import (
    LiteLLMJudgeClient,
    LiteLLMJudgeClientFactory,
)
from tests.evaluation.fake_observer import FakeJudgeObserver

_ACOMPLETION = (
    "agentic_harness.evaluation.infrastructure.litellm_judge.litellm.acompletion"
)
_RESULT_JSON = '{"rating": 4, "evaluation": "Done.", "feedback": "None."}'


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_config(model: str = "gpt-4o", temperature: float = 0.0) -> JudgeConfig:
    return JudgeConfig(model=model, temperature=temperature)


def _make_client(
    config: JudgeConfig | None = None,
) -> tuple[LiteLLMJudgeClient, FakeJudgeObserver]:
    observer = FakeJudgeObserver()
    cfg = config if config is not None else _make_config()
    return LiteLLMJudgeClient(config=cfg, observer=observer), observer


def _make_acompletion_response(content: str | None) -> MagicMock:
    """Build a mock litellm response object with the given message content."""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


# ---------------------------------------------------------------------------
# Construction — temperature warning
# ---------------------------------------------------------------------------


class TestConstruction:
    """LiteLLMJudgeClient emits a temperature warning when temperature > 0.0."""

    def test_zero_temperature_emits_no_warning(self) -> None:
        _, observer = _make_client(config=_make_config(temperature=0.0))

        assert len(observer.temperature_warnings) == 0

    def test_positive_temperature_emits_warning(self) -> None:
        _, observer = _make_client(config=_make_config(temperature=0.7))

        warning = observer.temperature_warnings[0]
        assert warning.temperature == pytest.approx(0.7)
        assert warning.model == "gpt-4o"


# ---------------------------------------------------------------------------
# complete() — success path
# ---------------------------------------------------------------------------


class TestCompleteSuccess:
    """complete() returns the raw judge text and emits the right events."""

    async def test_returns_raw_content(self) -> None:
        client, _ = _make_client()

        with patch(
            _ACOMPLETION,
            new=AsyncMock(return_value=_make_acompletion_response(_RESULT_JSON)),
        ):
            content = await client.complete("prompt", response_format=EvaluationResult)

        assert content == _RESULT_JSON

    async def test_sends_prompt_as_single_user_message(self) -> None:
        client, _ = _make_client(config=_make_config(model="judge-model"))
        mock = AsyncMock(return_value=_make_acompletion_response(_RESULT_JSON))

        with patch(_ACOMPLETION, new=mock):
            await client.complete("rate this", response_format=EvaluationResult)

        kwargs = mock.call_args.kwargs
        assert kwargs["model"] == "judge-model"
        assert kwargs["temperature"] == 0.0
        assert kwargs["messages"] == [{"role": "user", "content": "rate this"}]
        assert kwargs["response_format"] is EvaluationResult

    async def test_omits_response_format_when_not_given(self) -> None:
        client, _ = _make_client()
        mock = AsyncMock(return_value=_make_acompletion_response("plain"))

        with patch(_ACOMPLETION, new=mock):
            await client.complete("rate this")

        assert "response_format" not in mock.call_args.kwargs

    async def test_emits_started_and_completed(self) -> None:
        client, observer = _make_client()

        with patch(
            _ACOMPLETION,
            new=AsyncMock(return_value=_make_acompletion_response(_RESULT_JSON)),
        ):
            await client.complete("prompt")

        assert observer.started[0].model == "gpt-4o"
        assert observer.completed[0].duration_ms >= 0
        assert observer.failed == []

    async def test_completed_event_carries_prompt_and_answer(self) -> None:
        client, observer = _make_client()

        with patch(
            _ACOMPLETION,
            new=AsyncMock(return_value=_make_acompletion_response(_RESULT_JSON)),
        ):
            await client.complete("rate this")

        assert observer.completed[0].prompt == "rate this"
        assert observer.completed[0].answer == _RESULT_JSON


# ---------------------------------------------------------------------------
# complete() — failure path
# ---------------------------------------------------------------------------


class TestCompleteFailure:
    """complete() wraps litellm exceptions and empty answers as JudgeInvocationError."""

    async def test_litellm_exception_raises_judge_invocation_error(self) -> None:
        client, observer = _make_client()

        with patch(_ACOMPLETION, new=AsyncMock(side_effect=RuntimeError("boom"))):
            with pytest.raises(JudgeInvocationError) as exc_info:
                await client.complete("prompt")

        assert str(exc_info.value).startswith("Failed to ")
        assert exc_info.value.retriable is False
        assert observer.failed[0].reason == "boom"
        assert observer.completed == []

    async def test_rate_limit_is_retriable(self) -> None:
        client, _ = _make_client()
        error = litellm.RateLimitError(
            message="slow down", llm_provider="openai", model="gpt-4o"
        )

        with patch(_ACOMPLETION, new=AsyncMock(side_effect=error)):
            with pytest.raises(JudgeInvocationError) as exc_info:
                await client.complete("prompt")

        assert exc_info.value.retriable is True

    @pytest.mark.parametrize("content", [None, ""])
    async def test_empty_answer_raises(self, content: str | None) -> None:
        client, observer = _make_client()

        with patch(
            _ACOMPLETION,
            new=AsyncMock(return_value=_make_acompletion_response(content)),
        ):
            with pytest.raises(JudgeInvocationError, match="empty answer"):
                await client.complete("prompt")

        assert len(observer.failed) == 1


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestFactory:
    """LiteLLMJudgeClientFactory builds clients for its fixed configuration."""

    def test_satisfies_protocol(self) -> None:
        factory = LiteLLMJudgeClientFactory(
            config=_make_config(), observer=FakeJudgeObserver()
        )

        assert isinstance(factory, JudgeClientFactory)

    def test_create_returns_litellm_client(self) -> None:
        observer = FakeJudgeObserver()
        factory = LiteLLMJudgeClientFactory(
            config=_make_config(temperature=0.5), observer=observer
        )

        client = factory.create()

        assert isinstance(client, LiteLLMJudgeClient)
        assert len(observer.temperature_warnings) == 1
