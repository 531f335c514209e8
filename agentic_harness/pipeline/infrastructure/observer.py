"""Structlog implementation of the ModelObserver port."""

import structlog


class StructlogModelObserver:
    """Delegates model invocation events to structlog.

    Satisfies the ModelObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def model_call_started(self, model: str, num_messages: int) -> None:
        self._log.debug("model.call_started", model=model, num_messages=num_messages)

    def model_call_completed(
        self, model: str, duration_ms: int, has_tool_calls: bool
    ) -> None:
        self._log.info(
            "model.call_completed",
            model=model,
            duration_ms=duration_ms,
            has_tool_calls=has_tool_calls,
        )

    def model_call_failed(self, model: str, reason: str) -> None:
        self._log.error("model.call_failed", model=model, reason=reason)
