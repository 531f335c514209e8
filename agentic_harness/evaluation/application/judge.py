"""JudgeInvoker — scores one candidate response with the judge model."""

import re

from pydantic import ValidationError

from agentic_harness.chat.domain.message import MessageRole
from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.chat.domain.response import ChatResponse
from agentic_harness.evaluation.domain.errors import JudgeResponseParseError
from agentic_harness.evaluation.domain.judge import JudgeClient
from agentic_harness.evaluation.domain.result import EvaluationResult
from agentic_harness.evaluation.domain.template import PromptTemplate

_CONVERSATION_ROLES = (MessageRole.USER, MessageRole.ASSISTANT)

# A whole answer wrapped in a ```json ... ``` (or bare ```) fence.
_FENCED_ANSWER = re.compile(
    r"\A\s*```[A-Za-z]*[ \t]*\n(?P<body>.*?)\n?```\s*\Z", re.DOTALL
)


class JudgeInvoker:
    """Renders the evaluation prompt, calls the judge and parses its verdict.

    Stateless per call; one instance may serve concurrent evaluations.
    """

    def __init__(self, client: JudgeClient, template: PromptTemplate) -> None:
        self._client = client
        self._template = template

    async def evaluate(
        self, request: ChatRequest, response: ChatResponse
    ) -> EvaluationResult:
        """Return the judge's EvaluationResult for response as an answer to request.

        A markdown code fence around the JSON answer is removed first.

        Raises:
            JudgeResponseParseError: if the judge output is not a valid
                EvaluationResult. No fallback rating is ever substituted.
        Errors raised by the judge client propagate unchanged.
        """
        prompt = self._template.render(
            {
                "question": prompt_question(request),
                "answer": assistant_answer(response),
            }
        )
        raw = await self._client.complete(prompt, response_format=EvaluationResult)
        try:
            return EvaluationResult.model_validate_json(strip_code_fence(raw))
        except ValidationError as exc:
            raise JudgeResponseParseError(reason=str(exc)) from exc


def prompt_question(request: ChatRequest) -> str:
    """Flatten the request into "ROLE:text" lines, system message first.

    A missing system message is rendered as an empty "SYSTEM:" line. Only user
    and assistant turns follow, in their original order.
    """
    system = request.system_message
    lines = [f"{MessageRole.SYSTEM.name}:{system.text if system is not None else ''}"]
    lines.extend(
        f"{message.role.name}:{message.text}"
        for message in request.messages
        if message.role in _CONVERSATION_ROLES
    )
    return "\n".join(lines)


def strip_code_fence(raw: str) -> str:
    """Return the body of a fenced answer, or raw unchanged when it is not fenced."""
    match = _FENCED_ANSWER.match(raw)
    return match.group("body") if match is not None else raw


def assistant_answer(response: ChatResponse) -> str:
    return response.text
