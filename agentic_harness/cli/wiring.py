"""Assembles a ChatClient (evaluation, logging and chaos advisors) from a HarnessConfig."""

import random

from agentic_harness.config.domain.advisor import (
    EvaluationAdvisorBuilder,
    EvaluationAdvisorConfig,
)
from agentic_harness.config.domain.config import HarnessConfig
from agentic_harness.evaluation.application.advisor import EvaluationAdvisor
from agentic_harness.evaluation.domain.judge import JudgeClientFactory
from agentic_harness.evaluation.domain.observer import EvaluationObserver
from agentic_harness.evaluation.domain.template import StringPromptTemplate
from agentic_harness.pipeline.application.client import ChatClient
from agentic_harness.pipeline.domain.advisor import Advisor
from agentic_harness.pipeline.domain.model import ChatModel
from agentic_harness.pipeline.infrastructure.chaos_advisor import ChaosResponseAdvisor
from agentic_harness.pipeline.infrastructure.logging_advisor import LoggingAdvisor

# Offset from evaluation.order; the logging advisor must run inside the retry loop.
LOGGING_ADVISOR_OFFSET = 1


def build_evaluation_config(
    config: HarnessConfig, judge_client_factory: JudgeClientFactory
) -> EvaluationAdvisorConfig:
    """Map the file-level evaluation settings onto a validated advisor config.

    Raises:
        AdvisorConfigError: if the resulting settings are invalid.
        OSError: if prompt_template_path cannot be read.
    """
    settings = config.evaluation
    builder = (
        EvaluationAdvisorBuilder()
        .success_rating(settings.success_rating)
        .max_repeat_attempts(settings.max_repeat_attempts)
        .order(settings.order)
        .judge_client_factory(judge_client_factory)
    )
    if settings.prompt_template_path is not None:
        builder.prompt_template(
            StringPromptTemplate.from_file(settings.prompt_template_path)
        )
    return builder.build()


def logging_advisor_order(config: HarnessConfig) -> int:
    """Return the order that places the logging advisor right after evaluation.

    Chaos is registered later, so it stays behind logging on an equal order.
    """
    return config.evaluation.order + LOGGING_ADVISOR_OFFSET


def build_chat_client(
    config: HarnessConfig,
    model: ChatModel,
    judge_client_factory: JudgeClientFactory,
    evaluation_observer: EvaluationObserver,
) -> ChatClient:
    """Return a ChatClient whose chain runs evaluation, then logging, then chaos."""
    advisors: list[Advisor] = [
        EvaluationAdvisor(
            config=build_evaluation_config(
                config=config, judge_client_factory=judge_client_factory
            ),
            observer=evaluation_observer,
        )
    ]
    if config.log_requests:
        advisors.append(
            LoggingAdvisor(order=logging_advisor_order(config), label="[MAIN]")
        )
    if config.chaos.enabled:
        advisors.append(
            ChaosResponseAdvisor(
                order=config.chaos.order,
                probability=config.chaos.probability,
                rng=random.Random(config.chaos.seed),
            )
        )
    return ChatClient(model=model, advisors=advisors)
