"""LiteLLMJudgeClient — judge model access through LiteLLM."""

import time

import litellm
from pydantic import BaseModel

from agentic_harness.config.domain.judge import JudgeConfig
from agentic_harness.evaluation.domain.judge import JudgeClient
from agentic_harness.evaluation.domain.observer import JudgeObserver
from agentic_harness.evaluation.infrastructure.errors import JudgeInvocationError

_RETRIABLE_ERRORS: tuple[type[Exception], ...] = (
    litellm.RateLimitError,
    litellm.Timeout,
    litellm.APIConnectionError,
)


class LiteLLMJudgeClient:
    """JudgeClient that sends the rendered evaluation prompt as a single user turn.

    The judge is configured independently of the primary model, so a cheaper
    or stronger model can grade the answers.
    """

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                model=config.model, temperature=config.temperature
            )

    async def complete(
        self, prompt: str, response_format: type[BaseModel] | None = None
    ) -> str:
        """Return the raw text of the judge's answer.

        Raises:
            JudgeInvocationError: if the LLM call fails or yields no content.
        """
        self._observer.judge_call_started(model=self._config.model)

        kwargs: dict[str, object] = {}
        if response_format is not None:
            kwargs["response_format"] = response_format

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except Exception as exc:
            reason = str(exc)
            self._observer.judge_call_failed(model=self._config.model, reason=reason)
            raise JudgeInvocationError(
                reason=reason, retriable=isinstance(exc, _RETRIABLE_ERRORS)
            ) from exc

        content: str | None = response.choices[0].message.content
        if not content:
            reason = "judge returned an empty answer"
            self._observer.judge_call_failed(model=self._config.model, reason=reason)
            raise JudgeInvocationError(reason=reason)

        self._observer.judge_call_completed(
            model=self._config.model,
            duration_ms=int((time.monotonic() - start) * 1000),
            prompt=prompt,
            answer=content,
        )
        return content


class LiteLLMJudgeClientFactory:
    """Creates LiteLLMJudgeClient instances for a fixed judge configuration."""

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

    def create(self) -> JudgeClient:
        return LiteLLMJudgeClient(config=self._config, observer=self._observer)
