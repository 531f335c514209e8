"""Advisor Protocols — structural interfaces for stages of the advisor chain."""

from collections.abc import AsyncIterator
from typing import Protocol

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse


class CallChain(Protocol):
    """Continuation handed to a stage: invokes everything positioned after it."""

    async def next_call(self, request: ChatRequest) -> ChatResponse: ...


class StreamChain(Protocol):
    """Streaming continuation handed to a stage."""

    def next_stream(self, request: ChatRequest) -> AsyncIterator[ChatResponse]: ...


class CallAdvisor(Protocol):
    """A stage that wraps the blocking call path.

    name must be unique within a chain; order positions the stage (ascending).
    """

    @property
    def name(self) -> str: ...

    @property
    def order(self) -> int: ...

    async def advise_call(
        self, request: ChatRequest, chain: CallChain
    ) -> ChatResponse: ...


class StreamAdvisor(Protocol):
    """A stage that wraps the streaming path."""

    @property
    def name(self) -> str: ...

    @property
    def order(self) -> int: ...

    def advise_stream(
        self, request: ChatRequest, chain: StreamChain
    ) -> AsyncIterator[ChatResponse]: ...


class Advisor(CallAdvisor, StreamAdvisor, Protocol):
    """A stage taking part in both the call and the stream path."""
