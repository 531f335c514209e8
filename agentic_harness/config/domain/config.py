"""Top-level HarnessConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field, model_validator

from agentic_harness.config.domain.chaos import ChaosConfig
from agentic_harness.config.domain.evaluation import EvaluationSettings
from agentic_harness.config.domain.judge import JudgeConfig
from agentic_harness.config.domain.model import ModelConfig


class HarnessConfig(BaseModel, frozen=True):
    """Root configuration aggregate for an agentic-harness client."""

    name: str = Field(min_length=1)
    model: ModelConfig
    judge: JudgeConfig
    evaluation: EvaluationSettings = Field(default_factory=EvaluationSettings)
    chaos: ChaosConfig = Field(default_factory=ChaosConfig)
    log_requests: bool = True

    @model_validator(mode="after")
    def _chaos_runs_inside_evaluation(self) -> "HarnessConfig":
        if self.chaos.enabled and self.chaos.order <= self.evaluation.order:
            raise ValueError(
                "chaos.order must be greater than evaluation.order so that "
                "corrupted responses are evaluated"
            )
        return self
