"""Feedback augmentation — folds judge feedback into the next attempt's prompt."""

from agentic_harness.chat.domain.message import Message
from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.evaluation.domain.result import EvaluationResult

_FEEDBACK_TEMPLATE = """\
{original}

EVALUATION FEEDBACK - Your previous response was flagged for not fully completing the task:
{feedback}

IMPORTANT: Address the specific feedback above. Do NOT start over from scratch or delete existing work.
Make incremental corrections to actually complete what was originally asked.
"""


def add_evaluation_feedback(
    request: ChatRequest, evaluation: EvaluationResult
) -> ChatRequest:
    """Return a copy of request whose latest user message carries the feedback.

    Callers pass the pristine inbound request on every retry so that feedback
    from successive rounds never stacks up.
    """

    def _append(message: Message) -> Message:
        return message.with_text(
            _FEEDBACK_TEMPLATE.format(
                original=message.text, feedback=evaluation.feedback
            )
        )

    return request.augment_user_message(_append)
