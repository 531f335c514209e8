"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def find_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and has no default.

    Names are reported once each, in order of first appearance.
    """
    missing: list[str] = []
    _walk_strings(data, lambda text: _missing_in(text, missing))
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every reference replaced by its value.

    Call find_missing_vars first: an unset variable without a default raises
    KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_resolve, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _resolve(match: re.Match[str]) -> str:
    name = match.group("name")
    default = match.group("default")
    if default is not None:
        return os.environ.get(name, default)
    return os.environ[name]


def _missing_in(text: str, missing: list[str]) -> None:
    for match in _ENV_VAR_PATTERN.finditer(text):
        name = match.group("name")
        if match.group("default") is not None or name in os.environ:
            continue
        if name not in missing:
            missing.append(name)


def _walk_strings(data: RawValue, visit) -> None:  # type: ignore[no-untyped-def]
    if isinstance(data, str):
        visit(data)
    elif isinstance(data, list):
        for item in data:
            _walk_strings(item, visit)
    elif isinstance(data, dict):
        for value in data.values():
            _walk_strings(value, visit)
