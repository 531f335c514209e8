"""EvaluationAdvisorConfig and its builder — validated settings of the evaluation loop."""

from collections.abc import Callable
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.config.domain.errors import AdvisorConfigError
from agentic_harness.config.domain.evaluation import (
    DEFAULT_EVALUATION_ORDER,
    DEFAULT_MAX_REPEAT_ATTEMPTS,
    DEFAULT_SUCCESS_RATING,
)
from agentic_harness.evaluation.domain.judge import JudgeClientFactory
from agentic_harness.evaluation.domain.predicate import (
    SkipPredicate,
    skip_unevaluable_response,
)
from agentic_harness.evaluation.domain.template import (
    DEFAULT_EVALUATION_PROMPT_TEMPLATE,
    PromptTemplate,
)
from agentic_harness.pipeline.domain.ordering import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
)


class EvaluationAdvisorConfig(BaseModel):
    """Immutable settings shared read-only by every call of one EvaluationAdvisor."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success_rating: int = Field(
        default=DEFAULT_SUCCESS_RATING, ge=1, le=4, strict=True
    )
    max_repeat_attempts: int = Field(
        default=DEFAULT_MAX_REPEAT_ATTEMPTS, ge=1, strict=True
    )
    order: int = Field(
        default=DEFAULT_EVALUATION_ORDER,
        gt=HIGHEST_PRECEDENCE,
        lt=LOWEST_PRECEDENCE,
        strict=True,
    )
    prompt_template: PromptTemplate = DEFAULT_EVALUATION_PROMPT_TEMPLATE
    skip_evaluation_predicate: Callable[[ChatRequest, ChatResponse], bool] = (
        skip_unevaluable_response
    )
    judge_client_factory: JudgeClientFactory


class EvaluationAdvisorBuilder:
    """Accumulates settings and validates them all at once in build().

    Setters do not validate; build() reports every violation together. Each
    build() snapshots the current settings, so later setter calls never
    affect configs that were already built.
    """

    def __init__(self) -> None:
        self._settings: dict[str, object] = {}

    def success_rating(self, success_rating: int) -> Self:
        self._settings["success_rating"] = success_rating
        return self

    def max_repeat_attempts(self, max_repeat_attempts: int) -> Self:
        self._settings["max_repeat_attempts"] = max_repeat_attempts
        return self

    def order(self, order: int) -> Self:
        self._settings["order"] = order
        return self

    def prompt_template(self, prompt_template: PromptTemplate) -> Self:
        self._settings["prompt_template"] = prompt_template
        return self

    def skip_evaluation_predicate(self, predicate: SkipPredicate) -> Self:
        self._settings["skip_evaluation_predicate"] = predicate
        return self

    def judge_client_factory(self, factory: JudgeClientFactory) -> Self:
        self._settings["judge_client_factory"] = factory
        return self

    def build(self) -> EvaluationAdvisorConfig:
        """Validate the accumulated settings and return an immutable config.

        Raises:
            AdvisorConfigError: listing every invalid or missing setting.
        """
        try:
            return EvaluationAdvisorConfig.model_validate(dict(self._settings))
        except ValidationError as exc:
            raise AdvisorConfigError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
