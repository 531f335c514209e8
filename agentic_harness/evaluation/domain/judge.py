"""JudgeClient and JudgeClientFactory Protocols — the judge model boundary."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


class JudgeClient(Protocol):
    """Submits a standalone prompt to the judge model.

    Returns the raw text of the answer; when response_format is given the
    model is asked to answer with JSON matching that schema.
    """

    async def complete(
        self, prompt: str, response_format: type[BaseModel] | None = None
    ) -> str: ...


@runtime_checkable
class JudgeClientFactory(Protocol):
    """Constructs the JudgeClient an evaluation advisor uses for its lifetime."""

    def create(self) -> JudgeClient: ...
