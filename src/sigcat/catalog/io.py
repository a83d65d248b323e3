# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import cast

from .errors import CatalogIntegrityError
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogIntegrityError: If the schema cannot be parsed or is not a JSON object.
    """
    payload = _read_json(path, what="JSON schema")
    if not isinstance(payload, Mapping):
        raise CatalogIntegrityError(f"{path}: expected a JSON object")
    return payload


def load_document(path: Path) -> JSONValue:
    """Load a catalog JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogIntegrityError: If the path is not a readable file or the
            document is not valid UTF-8 JSON.
    """
    return _read_json(path, what="catalog JSON")


def _read_json(path: Path, *, what: str) -> JSONValue:
    if not path.exists():
        raise FileNotFoundError(path)
    if not path.is_file():
        raise CatalogIntegrityError(f"{path}: expected a {what} file")
    try:
        with path.open("r", encoding="utf-8") as stream:
            payload = cast(JSONValue, json.load(stream))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogIntegrityError(f"{path}: failed to parse {what}") from exc
    except OSError as exc:
        raise CatalogIntegrityError(f"{path}: cannot read {what} ({exc.strerror})") from exc
    return _ensure_json_value(payload, context=str(path))


def _ensure_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Ensure ``value`` is composed of JSON-compatible structures."""

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _ensure_json_value(item, context=f"{context}.{key}") for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_ensure_json_value(item, context=f"{context}[]") for item in value]
    raise CatalogIntegrityError(f"{context}: value is not valid JSON")  # pragma: no cover - json never yields this


__all__ = ["load_document", "load_schema"]
