# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the signature catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

CATALOG_SCHEMA_FILENAME: Final[str] = "catalog.schema.json"

TYPE_NAME_KEY: Final[str] = "typeName"
TYPE_NAME_ALIAS_KEY: Final[str] = "type"
GROUPS_KEY: Final[str] = "groups"
ITEMS_KEY: Final[str] = "items"
NAME_KEY: Final[str] = "name"
TYPES_KEY: Final[str] = "types"

__all__ = [
    "CATALOG_SCHEMA_FILENAME",
    "GROUPS_KEY",
    "ITEMS_KEY",
    "JSONPrimitive",
    "JSONValue",
    "NAME_KEY",
    "TYPES_KEY",
    "TYPE_NAME_ALIAS_KEY",
    "TYPE_NAME_KEY",
]
