# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read-only queries over a loaded signature catalog."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal, NamedTuple

from .model_catalog import Catalog, TypeEntry
from .signature import OperationSignature

LookupKind = Literal["type", "operation"]


@dataclass(frozen=True, slots=True)
class NotFound:
    """Result returned when a queried name is absent from the catalog.

    Instances are falsy so callers can branch with a plain truth test.
    """

    kind: LookupKind
    name: str
    type_name: str | None = None

    def __bool__(self) -> bool:
        return False

    def describe(self) -> str:
        """Return a human-readable description of the missing name."""

        if self.kind == "operation" and self.type_name is not None:
            return f"operation '{self.name}' not found on '{self.type_name}'"
        return f"{self.kind} '{self.name}' not found"


class SearchHit(NamedTuple):
    """Signature matched by :meth:`CatalogQueryService.search`."""

    type_name: str
    operation_name: str
    raw: str


@dataclass(frozen=True, slots=True)
class SearchResults:
    """Lazy, restartable sequence of signatures containing ``substring``.

    Every iteration rescans the catalog, yielding hits ordered by type name
    and then by position within the type.
    """

    catalog: Catalog
    substring: str

    def __iter__(self) -> Iterator[SearchHit]:
        for entry in sorted(self.catalog, key=lambda item: item.type_name):
            for signature in entry.signatures():
                if self.substring in signature.raw:
                    yield SearchHit(entry.type_name, signature.operation_name, signature.raw)


@dataclass(frozen=True, slots=True)
class CatalogQueryService:
    """Answer lookups against an immutable :class:`Catalog`."""

    catalog: Catalog

    def get_type(self, type_name: str) -> TypeEntry | NotFound:
        """Return the entry for ``type_name`` using an exact match.

        Args:
            type_name: Type name to look up.

        Returns:
            TypeEntry | NotFound: Matching entry or a ``NotFound`` marker.
        """

        entry = self.catalog.get(type_name)
        if entry is None:
            return NotFound(kind="type", name=type_name)
        return entry

    def list_groups(self, type_name: str) -> tuple[str, ...] | NotFound:
        """Return the group names declared by ``type_name`` in presentation order."""

        entry = self.get_type(type_name)
        if isinstance(entry, NotFound):
            return entry
        return entry.group_names

    def find_operation(self, type_name: str, operation_name: str) -> OperationSignature | NotFound:
        """Return the signature named ``operation_name`` within ``type_name``.

        Grouped and ungrouped operations are both considered.

        Args:
            type_name: Type declaring the operation.
            operation_name: Parsed operation name to match exactly.

        Returns:
            OperationSignature | NotFound: Matching signature or a ``NotFound``
            marker naming the missing type or operation.
        """

        entry = self.get_type(type_name)
        if isinstance(entry, NotFound):
            return entry
        signature = entry.operation(operation_name)
        if signature is None:
            return NotFound(kind="operation", name=operation_name, type_name=type_name)
        return signature

    def search(self, substring: str) -> SearchResults:
        """Return signatures whose raw text contains ``substring`` (case-sensitive).

        An empty ``substring`` matches every signature.
        """

        return SearchResults(catalog=self.catalog, substring=substring)


__all__ = [
    "CatalogQueryService",
    "NotFound",
    "SearchHit",
    "SearchResults",
]
