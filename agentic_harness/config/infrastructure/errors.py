"""Error types raised while reading a harness config file."""

from pathlib import Path

from agentic_harness.core.errors import HarnessError


class MissingEnvVarsError(HarnessError):
    """Raised when ${VAR} references without a default name unset variables.

    All missing names are collected before this is raised.
    """

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        super().__init__(
            "Failed to load config: unset environment variables "
            f"(set them or use ${{VAR:-default}}): {', '.join(sorted(missing_vars))}"
        )


class ConfigValidationError(HarnessError):
    """Raised when the document is not valid YAML or does not fit HarnessConfig."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(HarnessError):
    """Raised when the config file, or a prompt template it points to, is absent."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: no such file: {path}")
