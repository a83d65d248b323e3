# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises signature catalogs from raw records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .data import builtin_document_path
from .errors import (
    CatalogValidationError,
    DuplicateGroupName,
    EmptyGroupName,
    EmptyOperationList,
    EmptyTypeName,
    LoadError,
    MalformedRecord,
    MalformedSignature,
)
from .io import load_document
from .model_catalog import Catalog, OperationGroup, TypeEntry
from .schema import SchemaRepository
from .signature import OperationSignature
from .types import (
    GROUPS_KEY,
    ITEMS_KEY,
    NAME_KEY,
    TYPE_NAME_ALIAS_KEY,
    TYPE_NAME_KEY,
    TYPES_KEY,
    JSONValue,
)
from .utils import expect_mapping, expect_string, optional_sequence, string_array

LOGGER = logging.getLogger(__name__)


def load(raw_records: Iterable[JSONValue]) -> Catalog:
    """Validate ``raw_records`` and return the resulting catalog.

    Args:
        raw_records: Ordered raw records shaped ``{typeName, groups?, items?}``.

    Returns:
        Catalog: Immutable catalog preserving the record order.

    Raises:
        LoadError: If any record violates the catalog invariants. No partial
            catalog is produced.
    """

    entries = [_parse_record(record, position=position) for position, record in enumerate(raw_records)]
    catalog = Catalog.from_entries(entries)
    LOGGER.info("Loaded signature catalog with %d types (checksum %s)", len(catalog), catalog.checksum[:12])
    return catalog


def _parse_record(record: JSONValue, *, position: int) -> TypeEntry:
    """Convert one raw record into a :class:`TypeEntry`."""

    context = f"record[{position}]"
    mapping = expect_mapping(record, key="<record>", context=context)
    type_name = _record_type_name(mapping, context=context)

    groups: list[OperationGroup] = []
    seen_groups: set[str] = set()
    for index, raw_group in enumerate(optional_sequence(mapping.get(GROUPS_KEY), key=GROUPS_KEY, context=type_name)):
        group = _parse_group(raw_group, type_name=type_name, context=f"{type_name}.{GROUPS_KEY}[{index}]")
        if group.name in seen_groups:
            raise DuplicateGroupName(type_name, group.name)
        seen_groups.add(group.name)
        groups.append(group)

    ungrouped = _parse_items(mapping.get(ITEMS_KEY), context=type_name)
    entry = TypeEntry(type_name=type_name, groups=tuple(groups), ungrouped_items=ungrouped)
    LOGGER.debug(
        "Parsed type %s: %d groups, %d ungrouped operations",
        type_name,
        len(entry.groups),
        len(entry.ungrouped_items),
    )
    return entry


def _record_type_name(mapping: Mapping[str, JSONValue], *, context: str) -> str:
    key = TYPE_NAME_KEY if TYPE_NAME_KEY in mapping else TYPE_NAME_ALIAS_KEY
    if key not in mapping:
        raise MalformedRecord(context, f"missing '{TYPE_NAME_KEY}'")
    type_name = expect_string(mapping[key], key=key, context=context)
    if not type_name.strip():
        raise EmptyTypeName(context)
    return type_name


def _parse_group(raw_group: JSONValue, *, type_name: str, context: str) -> OperationGroup:
    mapping = expect_mapping(raw_group, key=GROUPS_KEY, context=context)
    raw_name = mapping.get(NAME_KEY)
    if raw_name is None:
        raise EmptyGroupName(type_name)
    name = expect_string(raw_name, key=NAME_KEY, context=context)
    if not name.strip():
        raise EmptyGroupName(type_name)
    items = _parse_items(mapping.get(ITEMS_KEY), context=f"{type_name}/{name}")
    if not items:
        raise EmptyOperationList(type_name, name)
    return OperationGroup(name=name, items=items)


def _parse_items(value: JSONValue | None, *, context: str) -> tuple[OperationSignature, ...]:
    signatures: list[OperationSignature] = []
    for raw in string_array(value, key=ITEMS_KEY, context=context):
        if not raw.strip():
            raise MalformedSignature(raw, "empty signature")
        signatures.append(OperationSignature.from_raw(raw))
    return tuple(signatures)


def records_from_document(document: JSONValue, *, context: str) -> tuple[JSONValue, ...]:
    """Extract raw records from a catalog document.

    Documents are either a bare array of records or an object with a
    ``types`` array.

    Args:
        document: Parsed JSON document.
        context: Human-readable source used in error messages.

    Returns:
        tuple[JSONValue, ...]: Raw records in document order.

    Raises:
        MalformedRecord: If the document has neither supported shape.
    """

    if isinstance(document, Mapping):
        return optional_sequence(document.get(TYPES_KEY), key=TYPES_KEY, context=context)
    return optional_sequence(document, key="<root>", context=context)


@dataclass(slots=True)
class CatalogLoader:
    """Loader that validates catalog documents and materialises catalogs."""

    validate_schema: bool = True
    schema_root: Path | None = None
    _schemas: SchemaRepository | None = field(default=None, init=False, repr=False)

    def load_records(self, raw_records: Iterable[JSONValue]) -> Catalog:
        """Return a catalog built from in-memory ``raw_records``."""

        return load(raw_records)

    def read_records(self, path: Path) -> tuple[JSONValue, ...]:
        """Read and structurally validate the raw records stored at ``path``.

        Args:
            path: JSON catalog document on disk.

        Returns:
            tuple[JSONValue, ...]: Raw records contained in the document.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        document = load_document(path)
        if self.validate_schema:
            self._validate_document(document, path=path)
        return records_from_document(document, context=str(path))

    def load_document(self, path: Path) -> Catalog:
        """Return a catalog built from the document at ``path``."""

        LOGGER.debug("Loading catalog document %s", path)
        return load(self.read_records(path))

    def load_paths(self, paths: Sequence[Path], *, include_builtin: bool = False) -> Catalog:
        """Return a single catalog built from several documents in order.

        Args:
            paths: Catalog documents whose records are concatenated.
            include_builtin: Prepend the bundled records when ``True``.

        Returns:
            Catalog: Catalog covering every record from ``paths``.

        Raises:
            LoadError: If the combined records violate catalog invariants,
                including a type declared in more than one document.
        """

        sources = [builtin_document_path(), *paths] if include_builtin else list(paths)
        records: list[JSONValue] = []
        for path in sources:
            records.extend(self.read_records(path))
        return load(records)

    def load_builtin(self) -> Catalog:
        """Return the catalog bundled with the package."""

        return self.load_document(builtin_document_path())

    def _validate_document(self, document: JSONValue, *, path: Path) -> None:
        """Validate ``document`` against the catalog JSON schema.

        Args:
            document: Raw JSON payload to validate.
            path: Filesystem path used in error reporting.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        if self._schemas is None:
            self._schemas = SchemaRepository.load(schema_root=self.schema_root)
        errors = sorted(self._schemas.catalog_validator.iter_errors(document), key=lambda error: error.message)
        if errors:
            raise CatalogValidationError(f"{path}: {errors[0].message}")


__all__ = [
    "CatalogLoader",
    "LoadError",
    "load",
    "records_from_document",
]
