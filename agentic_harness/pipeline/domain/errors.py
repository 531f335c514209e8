"""Error types raised while assembling or traversing the advisor chain."""

from agentic_harness.core.errors import HarnessError


class DuplicateAdvisorError(HarnessError):
    """Raised when two stages of one chain share the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Failed to build advisor chain: duplicate advisor name '{name}'"
        )
