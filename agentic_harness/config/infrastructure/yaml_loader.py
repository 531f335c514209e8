"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agentic_harness.config.domain.config import HarnessConfig
from agentic_harness.config.domain.observer import ConfigObserver
from agentic_harness.config.infrastructure.env_interpolation import (
    find_missing_vars,
    interpolate,
)
from agentic_harness.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a HarnessConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> HarnessConfig:
        """
        Load, interpolate, validate, and return a HarnessConfig from a YAML file.

        A relative evaluation.prompt_template_path is resolved against the
        directory of the config file.

        Raises:
            ConfigLoadError: if the file or the prompt template it references does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not valid YAML, is not a mapping,
                or violates the schema.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        cfg = _resolve_template_path(cfg=cfg, base_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML document must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    missing = find_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> HarnessConfig:
    try:
        return HarnessConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_template_path(cfg: HarnessConfig, base_dir: Path) -> HarnessConfig:
    template_path = cfg.evaluation.prompt_template_path
    if template_path is None:
        return cfg
    if not template_path.is_absolute():
        template_path = base_dir / template_path
    if not template_path.is_file():
        raise ConfigLoadError(path=template_path)
    evaluation = cfg.evaluation.model_copy(
        update={"prompt_template_path": template_path}
    )
    return cfg.model_copy(update={"evaluation": evaluation})


def _emit_warnings(cfg: HarnessConfig, observer: ConfigObserver) -> None:
    if cfg.judge.temperature > 0.0:
        observer.config_judge_temperature_warning(cfg.judge.temperature)
    if cfg.chaos.enabled:
        observer.config_chaos_enabled_warning(cfg.chaos.probability)
