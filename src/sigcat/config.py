# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and TOML sources for the signature catalog."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".sigcat.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "sigcat"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    color: bool = True
    emoji: bool = True


class SigcatConfig(BaseModel):
    """Top-level configuration controlling which catalogs are loaded."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    sources: list[Path] = Field(default_factory=list)
    include_builtin: bool = True
    validate_schema: bool = True
    output: OutputConfig = Field(default_factory=OutputConfig)

    def resolve_sources(self, root: Path) -> list[Path]:
        """Return ``sources`` with relative entries anchored at ``root``."""

        return [path if path.is_absolute() else root / path for path in self.sources]


def _read_toml(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML ({exc})") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any]:
    tool_section = _read_toml(path).get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return section


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(project_root: Path) -> SigcatConfig:
    """Load configuration for ``project_root``.

    ``[tool.sigcat]`` in ``pyproject.toml`` is read first and ``.sigcat.toml``
    overrides it key by key.

    Args:
        project_root: Directory holding the configuration files.

    Returns:
        SigcatConfig: Validated configuration, defaults when no file exists.

    Raises:
        ConfigError: If a file cannot be parsed or holds invalid values.
    """

    data = _deep_merge(
        _pyproject_section(project_root / PYPROJECT_FILENAME),
        _read_toml(project_root / CONFIG_FILENAME),
    )
    try:
        return SigcatConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid sigcat configuration under {project_root}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OutputConfig",
    "SigcatConfig",
    "load_config",
]
