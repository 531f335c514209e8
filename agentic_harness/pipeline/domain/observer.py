"""ModelObserver port — domain events emitted around terminal model calls."""

from typing import Protocol


class ModelObserver(Protocol):
    """Observer port for model invocation events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def model_call_started(self, model: str, num_messages: int) -> None: ...

    def model_call_completed(
        self, model: str, duration_ms: int, has_tool_calls: bool
    ) -> None: ...

    def model_call_failed(self, model: str, reason: str) -> None: ...
