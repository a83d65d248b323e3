# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the sigcat command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from sigcat.cli.app import EXIT_LOAD_ERROR, EXIT_NOT_FOUND, app

ITERATOR = "Iterator<Item = T>"


def _invoke(tmp_path: Path, *args: str) -> Result:
    runner = CliRunner()
    return runner.invoke(app, ["--root", str(tmp_path), "--no-emoji", "--no-color", *args])


def _write_json(path: Path, payload: object) -> Path:
    """Serialize ``payload`` as formatted JSON into ``path``."""

    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def test_find_prints_signature(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "find", ITERATOR, "map")

    assert result.exit_code == 0
    assert result.stdout.strip() == "map((T) -> U) -> Iterator<Item = U>"


def test_find_details(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "find", ITERATOR, "collect", "--details")

    assert result.exit_code == 0
    assert "returns: B" in result.stdout
    assert "constraints: B: FromIterator<T>" in result.stdout
    assert "receiver: self" in result.stdout


def test_find_unknown_operation_exits_not_found(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "find", ITERATOR, "reduce")

    assert result.exit_code == EXIT_NOT_FOUND
    assert "operation 'reduce' not found" in result.stdout


def test_show_unknown_type_exits_not_found(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "show", "Nonexistent")

    assert result.exit_code == EXIT_NOT_FOUND
    assert "type 'Nonexistent' not found" in result.stdout


def test_show_lists_groups(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "show", ITERATOR)

    assert result.exit_code == 0
    assert "Combinators" in result.stdout
    assert "count() -> usize" in result.stdout


def test_groups_command(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "groups", ITERATOR)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Combinators"]


def test_types_command(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "types")

    assert result.exit_code == 0
    assert ITERATOR in result.stdout


def test_search_command(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "search", "PartialOrd")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 5
    assert lines[0] == f"{ITERATOR}: partial_cmp(IntoIterator<Item = T>) -> Option<Ordering> where T: PartialOrd"


def test_search_without_hits_warns(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "search", "no-such-text")

    assert result.exit_code == 0
    assert "No signatures contain 'no-such-text'" in result.stdout


def test_catalog_option_adds_documents(tmp_path: Path) -> None:
    document = _write_json(tmp_path / "deque.json", [{"typeName": "Deque<T>", "items": ["len() -> usize"]}])

    result = _invoke(tmp_path, "--catalog", str(document), "search", "len")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Deque<T>: len() -> usize"]


def test_configured_sources_are_loaded(tmp_path: Path) -> None:
    _write_json(tmp_path / "deque.json", [{"typeName": "Deque<T>", "items": ["len() -> usize"]}])
    (tmp_path / ".sigcat.toml").write_text('sources = ["deque.json"]\ninclude_builtin = false\n', encoding="utf-8")

    result = _invoke(tmp_path, "types")

    assert result.exit_code == 0
    assert "Deque<T>" in result.stdout
    assert ITERATOR not in result.stdout


def test_validate_reports_summary(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "validate")

    assert result.exit_code == 0
    assert "Catalog valid: 1 types, 47 operations" in result.stdout


def test_validate_reports_load_errors(tmp_path: Path) -> None:
    document = _write_json(
        tmp_path / "dupes.json",
        [{"typeName": "A", "groups": [{"name": "G", "items": ["a() -> ()"]}], "items": ["a() -> u8"]}],
    )

    result = _invoke(tmp_path, "validate", str(document))

    assert result.exit_code == EXIT_LOAD_ERROR
    assert "duplicate operation 'a'" in result.stdout


def test_validate_reports_schema_errors(tmp_path: Path) -> None:
    document = _write_json(tmp_path / "bad.json", {"types": "nope"})

    result = _invoke(tmp_path, "validate", str(document))

    assert result.exit_code == EXIT_LOAD_ERROR
    assert "Failed to load catalog" in result.stdout


def test_validate_reports_undecodable_document(tmp_path: Path) -> None:
    document = tmp_path / "latin1.json"
    document.write_bytes(b'[{"typeName": "\xff\xfe"}]')

    result = _invoke(tmp_path, "validate", str(document))

    assert result.exit_code == EXIT_LOAD_ERROR
    assert "Failed to load catalog" in result.stdout


def test_validate_reports_directory_argument(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "validate", str(tmp_path))

    assert result.exit_code == EXIT_LOAD_ERROR
    assert "Failed to load catalog" in result.stdout


def test_invalid_config_exits_with_load_error(tmp_path: Path) -> None:
    (tmp_path / ".sigcat.toml").write_text("unknown = 1\n", encoding="utf-8")

    result = _invoke(tmp_path, "types")

    assert result.exit_code == EXIT_LOAD_ERROR
