"""Base exception class for all agentic-harness-specific errors."""


class HarnessError(Exception):
    """Base class for all agentic-harness errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
