"""Error types raised while assembling advisor configuration."""

from agentic_harness.core.errors import HarnessError


class AdvisorConfigError(HarnessError):
    """Raised when EvaluationAdvisorBuilder holds invalid or missing settings."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to build evaluation advisor config: {reason}")
