"""Error types raised by the evaluation domain."""

from agentic_harness.core.errors import HarnessError


class TemplateRenderError(HarnessError):
    """Raised when a prompt template references slots that were not supplied."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "Failed to render prompt template: missing values for "
            + ", ".join(sorted(missing))
        )


class JudgeResponseParseError(HarnessError):
    """Raised when the judge output cannot be decoded into an EvaluationResult."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to parse judge response: {reason}")


class StreamingNotSupportedError(HarnessError, NotImplementedError):
    """Raised by advisors that cannot take part in the streaming path."""

    def __init__(self, advisor: str) -> None:
        super().__init__(f"Failed to stream: {advisor} does not support streaming")


class EvaluationLoopError(HarnessError):
    """Raised when the evaluation loop exits without producing a response.

    Signals a programming error, never an expected outcome.
    """

    def __init__(self) -> None:
        super().__init__("Failed to evaluate response: unexpected loop exit")
