"""LiteLLMChatModel — terminal pipeline stage backed by LiteLLM."""

import time
from collections.abc import AsyncIterator
from typing import Any, TypeAlias

import litellm

from agentic_harness.chat.domain.message import Message, MessageRole, ToolCall
from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse, Generation, Usage
from agentic_harness.config.domain.model import ModelConfig
from agentic_harness.pipeline.domain.observer import ModelObserver
from agentic_harness.pipeline.infrastructure.errors import ModelInvocationError

_RETRIABLE_ERRORS: tuple[type[Exception], ...] = (
    litellm.RateLimitError,
    litellm.Timeout,
    litellm.APIConnectionError,
)

MessagePayload: TypeAlias = dict[str, Any]


class LiteLLMChatModel:
    """ChatModel implementation that delegates to any provider LiteLLM supports.

    Options on the request take precedence over the configured defaults.
    """

    def __init__(self, config: ModelConfig, observer: ModelObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

    async def call(self, request: ChatRequest) -> ChatResponse:
        """Execute the request and return the normalised response.

        Raises:
            ModelInvocationError: if the provider call fails or the payload
                cannot be interpreted.
        """
        model = self._model_for(request)
        self._observer.model_call_started(
            model=model, num_messages=len(request.messages)
        )

        start = time.monotonic()
        try:
            raw = await litellm.acompletion(**self._completion_kwargs(request))
            response = _to_chat_response(raw)
        except Exception as exc:
            reason = str(exc)
            self._observer.model_call_failed(model=model, reason=reason)
            raise ModelInvocationError(
                reason=reason, retriable=isinstance(exc, _RETRIABLE_ERRORS)
            ) from exc

        self._observer.model_call_completed(
            model=model,
            duration_ms=int((time.monotonic() - start) * 1000),
            has_tool_calls=response.has_tool_calls,
        )
        return response

    async def stream(self, request: ChatRequest) -> AsyncIterator[ChatResponse]:
        """Yield one ChatResponse per streamed chunk, each carrying only the delta text."""
        model = self._model_for(request)
        self._observer.model_call_started(
            model=model, num_messages=len(request.messages)
        )
        start = time.monotonic()
        try:
            chunks = await litellm.acompletion(
                **self._completion_kwargs(request), stream=True
            )
            async for chunk in chunks:
                choice = chunk.choices[0]
                yield ChatResponse(
                    generations=[
                        Generation(
                            output=Message.assistant(choice.delta.content or ""),
                            finish_reason=choice.finish_reason,
                        )
                    ],
                    model=getattr(chunk, "model", None),
                )
        except Exception as exc:
            reason = str(exc)
            self._observer.model_call_failed(model=model, reason=reason)
            raise ModelInvocationError(
                reason=reason, retriable=isinstance(exc, _RETRIABLE_ERRORS)
            ) from exc

        self._observer.model_call_completed(
            model=model,
            duration_ms=int((time.monotonic() - start) * 1000),
            has_tool_calls=False,
        )

    def _model_for(self, request: ChatRequest) -> str:
        return request.options.model or self._config.model

    def _completion_kwargs(self, request: ChatRequest) -> dict[str, Any]:
        options = request.options
        kwargs: dict[str, Any] = {
            "model": self._model_for(request),
            "messages": [_to_payload(message) for message in request.messages],
            "temperature": (
                options.temperature
                if options.temperature is not None
                else self._config.temperature
            ),
        }
        max_tokens = options.max_tokens or self._config.max_tokens
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        return kwargs


def _to_payload(message: Message) -> MessagePayload:
    payload: MessagePayload = {"role": message.role.value, "content": message.text}
    if message.role is MessageRole.ASSISTANT and message.tool_calls:
        payload["tool_calls"] = [
            {
                "id": call.id,
                "type": "function",
                "function": {"name": call.name, "arguments": call.arguments},
            }
            for call in message.tool_calls
        ]
    if message.role is MessageRole.TOOL and message.tool_call_id is not None:
        payload["tool_call_id"] = message.tool_call_id
    return payload


def _to_chat_response(raw: Any) -> ChatResponse:
    generations: list[Generation] = []
    for choice in raw.choices:
        tool_calls = [
            ToolCall(
                id=call.id,
                name=call.function.name,
                arguments=call.function.arguments or "{}",
            )
            for call in (getattr(choice.message, "tool_calls", None) or [])
        ]
        generations.append(
            Generation(
                output=Message.assistant(
                    choice.message.content or "", tool_calls=tool_calls
                ),
                finish_reason=choice.finish_reason,
            )
        )

    usage = getattr(raw, "usage", None)
    return ChatResponse(
        generations=generations,
        model=getattr(raw, "model", None),
        usage=Usage(
            input_tokens=getattr(usage, "prompt_tokens", None),
            output_tokens=getattr(usage, "completion_tokens", None),
        )
        if usage is not None
        else None,
    )
