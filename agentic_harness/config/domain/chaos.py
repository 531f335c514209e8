"""Chaos (response corruption) configuration model."""

from pydantic import BaseModel, Field

from agentic_harness.pipeline.domain.ordering import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
)


class ChaosConfig(BaseModel, frozen=True):
    """Disabled by default. When enabled, must sit after the evaluation advisor."""

    enabled: bool = False
    probability: float = Field(default=0.5, ge=0.0, le=1.0)
    order: int = Field(
        default=LOWEST_PRECEDENCE - 500,
        gt=HIGHEST_PRECEDENCE,
        lt=LOWEST_PRECEDENCE,
    )
    seed: int | None = None
