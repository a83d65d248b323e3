# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for read-only catalog queries."""

from __future__ import annotations

from sigcat.catalog import (
    Catalog,
    CatalogQueryService,
    NotFound,
    OperationSignature,
    SearchHit,
    TypeEntry,
    load,
)
from sigcat.catalog.types import JSONValue

ITERATOR = "Iterator<Item = T>"


def test_get_type_exact_match(builtin_query: CatalogQueryService) -> None:
    entry = builtin_query.get_type(ITERATOR)

    assert isinstance(entry, TypeEntry)
    assert entry.type_name == ITERATOR


def test_get_type_missing_returns_not_found(builtin_query: CatalogQueryService) -> None:
    result = builtin_query.get_type("Nonexistent")

    assert isinstance(result, NotFound)
    assert not result
    assert result.kind == "type"
    assert result.name == "Nonexistent"
    assert result.describe() == "type 'Nonexistent' not found"


def test_get_type_is_not_fuzzy(builtin_query: CatalogQueryService) -> None:
    assert isinstance(builtin_query.get_type("Iterator"), NotFound)
    assert isinstance(builtin_query.get_type("iterator<item = t>"), NotFound)


def test_list_groups(builtin_query: CatalogQueryService) -> None:
    assert builtin_query.list_groups(ITERATOR) == ("Combinators",)
    assert isinstance(builtin_query.list_groups("Nonexistent"), NotFound)


def test_find_operation_in_group(builtin_query: CatalogQueryService) -> None:
    signature = builtin_query.find_operation(ITERATOR, "map")

    assert isinstance(signature, OperationSignature)
    assert signature.raw == "map((T) -> U) -> Iterator<Item = U>"


def test_find_operation_in_ungrouped_items(builtin_query: CatalogQueryService) -> None:
    signature = builtin_query.find_operation(ITERATOR, "rposition")

    assert isinstance(signature, OperationSignature)
    assert signature.has_constraints is True
    assert signature.constraints == "Self: ExactSizeIterator + DoubleEndedIterator"


def test_find_operation_misses(builtin_query: CatalogQueryService) -> None:
    missing_operation = builtin_query.find_operation(ITERATOR, "reduce")
    missing_type = builtin_query.find_operation("Nonexistent", "map")

    assert isinstance(missing_operation, NotFound)
    assert missing_operation.kind == "operation"
    assert missing_operation.type_name == ITERATOR
    assert "reduce" in missing_operation.describe()
    assert isinstance(missing_type, NotFound)
    assert missing_type.kind == "type"


def test_find_operation_round_trip(builtin_catalog: Catalog, builtin_query: CatalogQueryService) -> None:
    for entry in builtin_catalog:
        for signature in entry.signatures():
            found = builtin_query.find_operation(entry.type_name, signature.operation_name)
            assert isinstance(found, OperationSignature)
            assert found.raw == signature.raw


def test_search_empty_substring_returns_everything(builtin_catalog: Catalog) -> None:
    query = CatalogQueryService(builtin_catalog)
    results = query.search("")

    hits = list(results)
    assert len(hits) == 47
    assert hits[0] == SearchHit(ITERATOR, "chain", "chain(IntoIterator<Item = T>) -> Iterator<Item = T>")
    assert hits[13].operation_name == "inspect"
    assert hits[14].operation_name == "count"
    assert list(results) == hits


def test_search_is_case_sensitive(builtin_query: CatalogQueryService) -> None:
    assert [hit.operation_name for hit in builtin_query.search("Ordering")] == [
        "max_by",
        "min_by",
        "cmp",
        "partial_cmp",
    ]
    assert list(builtin_query.search("ordering")) == []


def test_search_orders_by_type_name_then_position(sample_records: list[JSONValue]) -> None:
    query = CatalogQueryService(load(sample_records))

    hits = list(query.search(""))

    assert [(hit.type_name, hit.operation_name) for hit in hits] == [
        ("Deque<T>", "push_back"),
        ("Deque<T>", "pop_front"),
        ("Deque<T>", "len"),
        ("Stream<Item = T>", "map"),
        ("Stream<Item = T>", "next"),
        ("Stream<Item = T>", "empty"),
    ]


def test_search_is_lazy(sample_records: list[JSONValue]) -> None:
    query = CatalogQueryService(load(sample_records))

    iterator = iter(query.search("Option"))

    assert next(iterator) == SearchHit("Deque<T>", "pop_front", "pop_front() -> Option<T>")
    assert next(iterator).operation_name == "next"
