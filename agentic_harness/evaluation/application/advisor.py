"""EvaluationAdvisor — judge-scored, feedback-driven retry loop around the chain."""

from collections.abc import AsyncIterator
from dataclasses import dataclass

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.config.domain.advisor import EvaluationAdvisorConfig
from agentic_harness.evaluation.application.judge import JudgeInvoker
from agentic_harness.evaluation.domain.errors import (
    EvaluationLoopError,
    StreamingNotSupportedError,
)
from agentic_harness.evaluation.domain.feedback import add_evaluation_feedback
from agentic_harness.evaluation.domain.observer import EvaluationObserver
from agentic_harness.pipeline.domain.advisor import CallChain, StreamChain


@dataclass(frozen=True)
class _Attempt:
    """Loop state for one attempt: its 1-based number and the request to send."""

    number: int
    request: ChatRequest

    def retry(self, request: ChatRequest) -> "_Attempt":
        return _Attempt(number=self.number + 1, request=request)


class EvaluationAdvisor:
    """Evaluates each response with an LLM judge and retries with feedback.

    The response is scored point-wise on a 1-4 scale. Below success_rating
    the original request is re-sent with the judge's feedback appended to its
    latest user message, up to max_repeat_attempts retries. When every
    attempt fails, the last response is still returned: callers must not
    assume a returned response passed evaluation.

    The judge client is created once here and shared by all calls. The
    advisor keeps no per-call state, so concurrent calls are safe.
    """

    def __init__(
        self, config: EvaluationAdvisorConfig, observer: EvaluationObserver
    ) -> None:
        self._config = config
        self._observer = observer
        self._judge = JudgeInvoker(
            client=config.judge_client_factory.create(),
            template=config.prompt_template,
        )

    @property
    def name(self) -> str:
        return "evaluation_advisor"

    @property
    def order(self) -> int:
        return self._config.order

    async def advise_call(self, request: ChatRequest, chain: CallChain) -> ChatResponse:
        """Run up to max_repeat_attempts + 1 strictly sequential attempts.

        Delegate and judge errors propagate unchanged. Cancellation while
        awaiting either one stops the loop before any further attempt.
        """
        max_repeat_attempts = self._config.max_repeat_attempts
        attempt = _Attempt(number=1, request=request)

        while attempt.number <= max_repeat_attempts + 1:
            response = await chain.next_call(attempt.request)

            if self._config.skip_evaluation_predicate(request, response):
                self._observer.evaluation_skipped(attempt=attempt.number)
                return response

            evaluation = await self._judge.evaluate(attempt.request, response)

            if evaluation.rating >= self._config.success_rating:
                self._observer.evaluation_passed(
                    attempt=attempt.number,
                    rating=evaluation.rating,
                    evaluation=evaluation.evaluation,
                )
                return response

            if attempt.number > max_repeat_attempts:
                self._observer.evaluation_attempts_exhausted(
                    max_repeat_attempts=max_repeat_attempts,
                    rating=evaluation.rating,
                    feedback=evaluation.feedback,
                )
                return response

            self._observer.evaluation_failed(
                attempt=attempt.number,
                rating=evaluation.rating,
                evaluation=evaluation.evaluation,
                feedback=evaluation.feedback,
            )
            # Always augment the inbound request so feedback never compounds.
            attempt = attempt.retry(add_evaluation_feedback(request, evaluation))

        raise EvaluationLoopError()

    def advise_stream(
        self, request: ChatRequest, chain: StreamChain
    ) -> AsyncIterator[ChatResponse]:
        """Streaming cannot be evaluated: the judge needs the complete answer.

        Raises:
            StreamingNotSupportedError: always, before touching the chain.
        """
        raise StreamingNotSupportedError(advisor=self.name)
