# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Signature data bundled with the package."""

from __future__ import annotations

from pathlib import Path
from typing import Final

BUILTIN_DOCUMENT: Final[str] = "iterator.json"


def builtin_document_path() -> Path:
    """Return the path of the bundled ``Iterator<Item = T>`` catalog document."""

    return Path(__file__).resolve().parent / BUILTIN_DOCUMENT


__all__ = ["BUILTIN_DOCUMENT", "builtin_document_path"]
