# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating raw catalog record structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import MalformedRecord
from .types import JSONValue


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw value extracted from the record payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        MalformedRecord: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise MalformedRecord(context, f"expected '{key}' to be an object")
    return value


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a catalog error.

    Args:
        value: Raw value extracted from the record payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Value as a string.

    Raises:
        MalformedRecord: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise MalformedRecord(context, f"expected '{key}' to be a string")
    return value


def optional_sequence(value: JSONValue | None, *, key: str, context: str) -> tuple[JSONValue, ...]:
    """Return ``value`` as a tuple, treating ``None`` as an empty sequence.

    Args:
        value: Raw value extracted from the record payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[JSONValue, ...]: Entries of ``value`` in their original order.

    Raises:
        MalformedRecord: If ``value`` is present but not an array.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise MalformedRecord(context, f"expected '{key}' to be an array")
    return tuple(value)


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw value extracted from the record payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        MalformedRecord: If ``value`` is not a sequence of strings.
    """
    result: list[str] = []
    for index, item in enumerate(optional_sequence(value, key=key, context=context)):
        if not isinstance(item, str):
            raise MalformedRecord(context, f"expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


__all__ = [
    "expect_mapping",
    "expect_string",
    "optional_sequence",
    "string_array",
]
