# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural parsing of textual operation signatures.

Signatures are treated as opaque text apart from their outline::

    [::]name(param, ...) [-> return type] [where bounds]

A leading ``::`` marks an associated function that does not take the receiver.
Nested ``()``, ``<>`` and ``[]`` pairs must balance; the ``->`` arrow inside
closure parameters never counts as a closing angle bracket.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from .errors import MalformedSignature

ASSOCIATED_PREFIX: Final[str] = "::"
ARROW: Final[str] = "->"
WHERE_KEYWORD: Final[str] = "where"

_IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"[^\W\d]\w*")
_OPENERS: Final[dict[str, str]] = {"(": ")", "<": ">", "[": "]"}
_CLOSERS: Final[frozenset[str]] = frozenset(_OPENERS.values())


class _Unbalanced(ValueError):
    """Internal signal raised when brackets do not pair up."""


@dataclass(frozen=True, slots=True)
class ParsedSignature:
    """Outline of a signature split into its structural parts."""

    name: str
    takes_self: bool
    parameters: tuple[str, ...]
    return_type: str | None
    constraints: str | None

    @property
    def has_constraints(self) -> bool:
        """Return ``True`` when the signature carries a ``where`` clause."""

        return self.constraints is not None


@dataclass(frozen=True, slots=True)
class OperationSignature:
    """Single operation signature retained verbatim with parsed accessors."""

    raw: str

    @classmethod
    def from_raw(cls, raw: str) -> OperationSignature:
        """Return a signature for ``raw`` after checking that it parses.

        Args:
            raw: Signature text as supplied by the catalog record.

        Returns:
            OperationSignature: Signature wrapping ``raw`` unchanged.

        Raises:
            MalformedSignature: If ``raw`` has no operation name or parameter list.
        """

        parse_signature(raw)
        return cls(raw=raw)

    @property
    def parsed(self) -> ParsedSignature:
        """Return the memoised structural outline of the signature."""

        return parse_signature(self.raw)

    @property
    def operation_name(self) -> str:
        """Return the operation name preceding the parameter list."""

        return self.parsed.name

    @property
    def has_constraints(self) -> bool:
        """Return ``True`` when a bounds clause trails the signature."""

        return self.parsed.has_constraints

    @property
    def takes_self(self) -> bool:
        """Return ``False`` for associated functions written with ``::``."""

        return self.parsed.takes_self

    @property
    def parameters(self) -> tuple[str, ...]:
        """Return the top-level parameter texts."""

        return self.parsed.parameters

    @property
    def return_type(self) -> str | None:
        """Return the text following ``->`` if present."""

        return self.parsed.return_type

    @property
    def constraints(self) -> str | None:
        """Return the text following ``where`` if present."""

        return self.parsed.constraints

    def __str__(self) -> str:
        return self.raw


@lru_cache(maxsize=4096)
def parse_signature(raw: str) -> ParsedSignature:
    """Split ``raw`` into name, parameters, return type and constraints.

    Args:
        raw: Signature text to parse.

    Returns:
        ParsedSignature: Structural outline of ``raw``.

    Raises:
        MalformedSignature: If ``raw`` does not follow the signature outline.
    """

    text = raw.strip()
    if not text:
        raise MalformedSignature(raw, "empty signature")

    takes_self = not text.startswith(ASSOCIATED_PREFIX)
    if not takes_self:
        text = text[len(ASSOCIATED_PREFIX) :]

    match = _IDENTIFIER.match(text)
    if match is None:
        raise MalformedSignature(raw, "missing operation name")
    name = match.group()
    position = _skip_spaces(text, match.end())
    if position >= len(text) or text[position] != "(":
        raise MalformedSignature(raw, "missing parameter list")

    try:
        close = _matching_paren(text, position)
        parameters = _split_parameters(text[position + 1 : close])
        return_type, constraints = _split_tail(text[close + 1 :].strip())
    except _Unbalanced as exc:
        raise MalformedSignature(raw, "unbalanced brackets") from exc
    except ValueError as exc:
        raise MalformedSignature(raw, str(exc)) from exc

    return ParsedSignature(
        name=name,
        takes_self=takes_self,
        parameters=parameters,
        return_type=return_type,
        constraints=constraints,
    )


def _skip_spaces(text: str, position: int) -> int:
    while position < len(text) and text[position].isspace():
        position += 1
    return position


def _scan(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield ``(index, token, depth)`` for each token in ``text``.

    ``depth`` counts the brackets enclosing the token; a closing bracket
    reports the depth of its opener. Raises :class:`_Unbalanced` lazily once a
    mismatch is reached.
    """

    stack: list[str] = []
    index = 0
    while index < len(text):
        if text.startswith(ARROW, index):
            yield index, ARROW, len(stack)
            index += len(ARROW)
            continue
        char = text[index]
        if char in _OPENERS:
            yield index, char, len(stack)
            stack.append(_OPENERS[char])
        elif char in _CLOSERS:
            if not stack or stack.pop() != char:
                raise _Unbalanced(index)
            yield index, char, len(stack)
        else:
            yield index, char, len(stack)
        index += 1
    if stack:
        raise _Unbalanced(len(text))


def _matching_paren(text: str, start: int) -> int:
    for index, token, depth in _scan(text[start:]):
        if token == ")" and depth == 0:
            return start + index
    raise _Unbalanced(start)  # pragma: no cover - _scan raises first


def _split_parameters(text: str) -> tuple[str, ...]:
    if not text.strip():
        return ()
    pieces: list[str] = []
    begin = 0
    for index, token, depth in _scan(text):
        if token == "," and depth == 0:
            pieces.append(text[begin:index])
            begin = index + 1
    pieces.append(text[begin:])
    parameters = tuple(piece.strip() for piece in pieces)
    if not all(parameters):
        raise ValueError("empty parameter")
    return parameters


def _split_tail(tail: str) -> tuple[str | None, str | None]:
    return_type: str | None = None
    if tail.startswith(ARROW):
        remainder = tail[len(ARROW) :].strip()
        where_at = _find_where(remainder)
        return_type = (remainder if where_at is None else remainder[:where_at]).strip()
        if not return_type:
            raise ValueError("missing return type")
        tail = "" if where_at is None else remainder[where_at:]

    if not tail:
        return return_type, None
    if _find_where(tail) != 0:
        raise ValueError(f"unexpected trailing text {tail!r}")
    constraints = tail[len(WHERE_KEYWORD) :].strip()
    if not constraints:
        raise ValueError("empty where clause")
    for _ in _scan(constraints):
        pass
    return return_type, constraints


def _find_where(text: str) -> int | None:
    """Return the offset of a top-level ``where`` keyword in ``text``."""

    end_offset = len(WHERE_KEYWORD)
    for index, token, depth in _scan(text):
        if depth or token != WHERE_KEYWORD[0] or not text.startswith(WHERE_KEYWORD, index):
            continue
        before_ok = index == 0 or text[index - 1].isspace()
        after = index + end_offset
        after_ok = after == len(text) or text[after].isspace()
        if before_ok and after_ok:
            return index
    return None


__all__ = [
    "OperationSignature",
    "ParsedSignature",
    "parse_signature",
]
