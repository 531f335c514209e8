"""Observer ports for the evaluation domain — events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events from the evaluation loop.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def evaluation_skipped(self, attempt: int) -> None: ...

    def evaluation_passed(self, attempt: int, rating: int, evaluation: str) -> None: ...

    def evaluation_failed(
        self, attempt: int, rating: int, evaluation: str, feedback: str
    ) -> None: ...

    def evaluation_attempts_exhausted(
        self, max_repeat_attempts: int, rating: int, feedback: str
    ) -> None: ...


class JudgeObserver(Protocol):
    """Observer port for judge model invocations."""

    def judge_call_started(self, model: str) -> None: ...

    def judge_call_completed(
        self, model: str, duration_ms: int, prompt: str, answer: str
    ) -> None: ...

    def judge_call_failed(self, model: str, reason: str) -> None: ...

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None: ...
