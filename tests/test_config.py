# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for sigcat configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from sigcat.config import ConfigError, SigcatConfig, load_config


def test_defaults_without_files(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == SigcatConfig()
    assert config.include_builtin is True
    assert config.validate_schema is True
    assert config.output.color is True


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.sigcat]\nsources = ["catalog/extra.json"]\ninclude_builtin = false\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.include_builtin is False
    assert config.resolve_sources(tmp_path) == [tmp_path / "catalog" / "extra.json"]


def test_dotfile_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.sigcat]\nvalidate_schema = false\n\n[tool.sigcat.output]\nemoji = false\ncolor = false\n",
        encoding="utf-8",
    )
    (tmp_path / ".sigcat.toml").write_text("[output]\ncolor = true\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.validate_schema is False
    assert config.output.emoji is False
    assert config.output.color is True


def test_absolute_sources_are_kept(tmp_path: Path) -> None:
    absolute = tmp_path / "elsewhere.json"
    config = SigcatConfig(sources=[absolute])

    assert config.resolve_sources(Path("/unused")) == [absolute]


def test_unknown_keys_raise_config_error(tmp_path: Path) -> None:
    (tmp_path / ".sigcat.toml").write_text("colour = true\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".sigcat.toml").write_text("sources = [\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
