"""Evaluation loop settings as they appear in the harness config file."""

from pathlib import Path

from pydantic import BaseModel, Field

from agentic_harness.pipeline.domain.ordering import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
)

DEFAULT_SUCCESS_RATING = 4
DEFAULT_MAX_REPEAT_ATTEMPTS = 3
DEFAULT_EVALUATION_ORDER = LOWEST_PRECEDENCE - 2000


class EvaluationSettings(BaseModel, frozen=True):
    """File-level evaluation settings, mapped onto EvaluationAdvisorBuilder at startup."""

    success_rating: int = Field(default=DEFAULT_SUCCESS_RATING, ge=1, le=4)
    max_repeat_attempts: int = Field(default=DEFAULT_MAX_REPEAT_ATTEMPTS, ge=1)
    order: int = Field(
        default=DEFAULT_EVALUATION_ORDER,
        gt=HIGHEST_PRECEDENCE,
        lt=LOWEST_PRECEDENCE,
    )
    prompt_template_path: Path | None = None
