"""Error types raised by pipeline infrastructure."""

from agentic_harness.core.errors import HarnessError


class ModelInvocationError(HarnessError):
    """Raised when the chat model cannot be invoked or returns an unusable payload."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to invoke chat model: {reason}", retriable=retriable)
