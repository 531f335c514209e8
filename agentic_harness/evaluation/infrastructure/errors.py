"""Error types raised by judge infrastructure."""

from agentic_harness.core.errors import HarnessError


class JudgeInvocationError(HarnessError):
    """Raised when the judge model cannot be invoked or returns no content."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to invoke judge: {reason}", retriable=retriable)
