"""CLI entrypoint for agentic-harness — typer app with `ask` and `check` commands."""

import asyncio
import sys
from pathlib import Path

import structlog
import typer

from agentic_harness.chat.domain.request import ChatRequest
from agentic_harness.cli.wiring import build_chat_client
from agentic_harness.config.domain.config import HarnessConfig
from agentic_harness.config.infrastructure.observer import StructlogConfigObserver
from agentic_harness.config.infrastructure.yaml_loader import YamlConfigLoader
from agentic_harness.core.errors import HarnessError
from agentic_harness.evaluation.infrastructure.litellm_judge import (
    LiteLLMJudgeClientFactory,
)
from agentic_harness.evaluation.infrastructure.observer import (
    StructlogEvaluationObserver,
    StructlogJudgeObserver,
)
from agentic_harness.pipeline.application.client import ChatClient
from agentic_harness.pipeline.infrastructure.litellm_model import LiteLLMChatModel
from agentic_harness.pipeline.infrastructure.observer import StructlogModelObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _load_config(config_path: Path) -> HarnessConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _build_client(config: HarnessConfig) -> ChatClient:
    return build_chat_client(
        config=config,
        model=LiteLLMChatModel(config=config.model, observer=StructlogModelObserver()),
        judge_client_factory=LiteLLMJudgeClientFactory(
            config=config.judge, observer=StructlogJudgeObserver()
        ),
        evaluation_observer=StructlogEvaluationObserver(),
    )


async def _ask(client: ChatClient, request: ChatRequest) -> str:
    response = await client.call(request)
    return response.text


async def _ask_streaming(client: ChatClient, request: ChatRequest) -> str:
    parts: list[str] = []
    async for chunk in client.stream(request):
        parts.append(chunk.text)
    return "".join(parts)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to send to the model"),
    config_path: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to harness config YAML",
    ),
    system: str | None = typer.Option(
        None,
        "--system",
        "-s",
        help="Optional system prompt",
    ),
    stream: bool = typer.Option(
        False,
        "--stream",
        help="Stream the answer (not supported while evaluation is active)",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Ask one question through the evaluated chat pipeline and print the answer."""
    _configure_structlog(log_format=log_format)

    try:
        config = _load_config(config_path=config_path)
        client = _build_client(config=config)
        request = ChatRequest.from_text(question, system=system)

        if stream:
            answer = asyncio.run(_ask_streaming(client=client, request=request))
        else:
            answer = asyncio.run(_ask(client=client, request=request))
        typer.echo(answer)

    except KeyboardInterrupt:
        typer.echo("Interrupted.")
        sys.exit(1)
    except HarnessError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def check(
    config_path: Path = typer.Argument(..., help="Path to harness config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Validate a config file and print the resulting advisor chain."""
    _configure_structlog(log_format=log_format)

    try:
        config = _load_config(config_path=config_path)
        client = _build_client(config=config)
    except HarnessError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)

    typer.echo(f"{config.name}: {config.model.model} (judge: {config.judge.model})")
    for advisor in client.advisors:
        typer.echo(f"  {advisor.order:>12}  {advisor.name}")
    typer.echo(f"  {'model':>12}  {config.model.model}")


if __name__ == "__main__":
    app()
