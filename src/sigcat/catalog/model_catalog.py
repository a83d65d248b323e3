# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate models produced by the signature loader."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .checksum import compute_catalog_checksum
from .errors import DuplicateOperationName, DuplicateTypeName
from .signature import OperationSignature
from .types import GROUPS_KEY, ITEMS_KEY, NAME_KEY, TYPE_NAME_KEY, JSONValue


@dataclass(frozen=True, slots=True)
class OperationGroup:
    """Named, ordered subset of a type's operations."""

    name: str
    items: tuple[OperationSignature, ...]

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the raw record form of the group."""

        return {NAME_KEY: self.name, ITEMS_KEY: [item.raw for item in self.items]}


@dataclass(frozen=True, slots=True)
class TypeEntry:
    """Documented interface together with its grouped and ungrouped operations."""

    type_name: str
    groups: tuple[OperationGroup, ...] = ()
    ungrouped_items: tuple[OperationSignature, ...] = ()
    _operations: Mapping[str, OperationSignature] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Index operations by name and reject duplicates."""

        operations: dict[str, OperationSignature] = {}
        for signature in self.signatures():
            name = signature.operation_name
            if name in operations:
                raise DuplicateOperationName(self.type_name, name)
            operations[name] = signature
        object.__setattr__(self, "_operations", MappingProxyType(operations))

    @property
    def group_names(self) -> tuple[str, ...]:
        """Return group names in presentation order."""

        return tuple(group.name for group in self.groups)

    @property
    def operations(self) -> Mapping[str, OperationSignature]:
        """Return a read-only mapping of operation names to signatures."""

        return self._operations

    def signatures(self) -> Iterator[OperationSignature]:
        """Yield every signature, group items first, then ungrouped items."""

        for group in self.groups:
            yield from group.items
        yield from self.ungrouped_items

    def operation(self, operation_name: str) -> OperationSignature | None:
        """Return the signature named ``operation_name`` if the type declares it."""

        return self._operations.get(operation_name)

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the canonical raw record form of the entry."""

        payload: dict[str, JSONValue] = {TYPE_NAME_KEY: self.type_name}
        if self.groups:
            payload[GROUPS_KEY] = [group.to_dict() for group in self.groups]
        if self.ungrouped_items:
            payload[ITEMS_KEY] = [item.raw for item in self.ungrouped_items]
        return payload


@dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable set of type entries keyed by type name in input order."""

    _entries: tuple[TypeEntry, ...]
    checksum: str
    _index: Mapping[str, TypeEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate type name uniqueness and cache the lookup index."""

        index: dict[str, TypeEntry] = {}
        for entry in self._entries:
            if entry.type_name in index:
                raise DuplicateTypeName(entry.type_name)
            index[entry.type_name] = entry
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_entries(cls, entries: Sequence[TypeEntry]) -> Catalog:
        """Build a catalog from ``entries`` computing its checksum.

        Args:
            entries: Type entries in their original order.

        Returns:
            Catalog: Catalog holding ``entries``.

        Raises:
            DuplicateTypeName: If two entries share a type name.
        """

        materialised = tuple(entries)
        checksum = compute_catalog_checksum(entry.to_dict() for entry in materialised)
        return cls(_entries=materialised, checksum=checksum)

    @property
    def types(self) -> tuple[TypeEntry, ...]:
        """Return the type entries in input order."""

        return self._entries

    @property
    def type_names(self) -> tuple[str, ...]:
        """Return the type names in input order."""

        return tuple(self._index)

    @property
    def entries(self) -> Mapping[str, TypeEntry]:
        """Return a read-only mapping from type name to entry."""

        return self._index

    def get(self, type_name: str) -> TypeEntry | None:
        """Return the entry for ``type_name`` when present."""

        return self._index.get(type_name)

    def to_records(self) -> list[dict[str, JSONValue]]:
        """Return the catalog as a list of canonical raw records."""

        return [entry.to_dict() for entry in self._entries]

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._index

    def __iter__(self) -> Iterator[TypeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


EMPTY_CATALOG = Catalog.from_entries(())


__all__ = [
    "Catalog",
    "EMPTY_CATALOG",
    "OperationGroup",
    "TypeEntry",
]
