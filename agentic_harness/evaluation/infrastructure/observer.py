"""Structlog implementations of the evaluation and judge observer ports."""

import structlog


class StructlogEvaluationObserver:
    """Delegates evaluation loop events to structlog.

    Satisfies the EvaluationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluation_skipped(self, attempt: int) -> None:
        self._log.debug(
            "evaluation.skipped",
            attempt=attempt,
            reason="skip_evaluation_predicate returned true",
        )

    def evaluation_passed(self, attempt: int, rating: int, evaluation: str) -> None:
        self._log.info(
            "evaluation.passed", attempt=attempt, rating=rating, evaluation=evaluation
        )

    def evaluation_failed(
        self, attempt: int, rating: int, evaluation: str, feedback: str
    ) -> None:
        self._log.warning(
            "evaluation.failed",
            attempt=attempt,
            rating=rating,
            evaluation=evaluation,
            feedback=feedback,
        )

    def evaluation_attempts_exhausted(
        self, max_repeat_attempts: int, rating: int, feedback: str
    ) -> None:
        self._log.warning(
            "evaluation.attempts_exhausted",
            max_repeat_attempts=max_repeat_attempts,
            rating=rating,
            feedback=feedback,
            message="Returning last response despite failed evaluation",
        )


class StructlogJudgeObserver:
    """Delegates judge invocation events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_call_started(self, model: str) -> None:
        self._log.debug("judge.call_started", model=model)

    def judge_call_completed(
        self, model: str, duration_ms: int, prompt: str, answer: str
    ) -> None:
        self._log.info("judge.call_completed", model=model, duration_ms=duration_ms)
        self._log.debug("judge.exchange", model=model, prompt=prompt, answer=answer)

    def judge_call_failed(self, model: str, reason: str) -> None:
        self._log.error("judge.call_failed", model=model, reason=reason)

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None:
        self._log.warning(
            "judge.high_temperature_warned", model=model, temperature=temperature
        )
