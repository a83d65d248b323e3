# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for catalog contents."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Mapping

from .types import JSONValue


def compute_catalog_checksum(records: Iterable[Mapping[str, JSONValue]]) -> str:
    """Calculate the catalog checksum for canonical ``records``.

    Args:
        records: Canonical record mappings in catalog order.

    Returns:
        str: Hex-encoded SHA-256 checksum covering the records.
    """
    hasher = hashlib.sha256()
    for record in records:
        hasher.update(json.dumps(record, sort_keys=True, separators=(",", ":")).encode("utf-8"))
        hasher.update(b"\0")
    return hasher.hexdigest()


__all__ = ["compute_catalog_checksum"]
