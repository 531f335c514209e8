"""ChatModel Protocol — the terminal stage that actually executes a request."""

from collections.abc import AsyncIterator
from typing import Protocol

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse


class ChatModel(Protocol):
    """Structural interface satisfied by any language-model backend."""

    async def call(self, request: ChatRequest) -> ChatResponse: ...

    def stream(self, request: ChatRequest) -> AsyncIterator[ChatResponse]: ...
