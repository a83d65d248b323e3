# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for swapping the process-wide catalog."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from sigcat.catalog import Catalog, CatalogHolder, DuplicateTypeName, NotFound, load
from sigcat.catalog.types import JSONValue


def test_holder_starts_empty() -> None:
    holder = CatalogHolder()

    assert len(holder.current) == 0
    assert list(holder.query().search("")) == []


def test_reload_swaps_whole_catalog(builtin_catalog: Catalog, sample_records: list[JSONValue]) -> None:
    holder = CatalogHolder(builtin_catalog)
    previous = holder.current

    replaced = holder.reload(sample_records)

    assert holder.current is replaced
    assert replaced.type_names == ("Stream<Item = T>", "Deque<T>")
    assert previous.type_names == ("Iterator<Item = T>",)
    assert isinstance(holder.query().get_type("Iterator<Item = T>"), NotFound)


def test_failed_reload_keeps_previous_catalog(builtin_catalog: Catalog) -> None:
    holder = CatalogHolder(builtin_catalog)
    bad_records: list[JSONValue] = [{"typeName": "A"}, {"typeName": "A"}]

    with pytest.raises(DuplicateTypeName):
        holder.reload(bad_records)

    assert holder.current is builtin_catalog


def test_reload_with_identical_content_keeps_value(sample_records: list[JSONValue]) -> None:
    holder = CatalogHolder(load(sample_records))
    original = holder.current

    assert holder.reload(sample_records) is original


def test_query_service_outlives_reload(builtin_catalog: Catalog, sample_records: list[JSONValue]) -> None:
    holder = CatalogHolder(builtin_catalog)
    service = holder.query()

    holder.reload(sample_records)

    assert service.catalog is builtin_catalog
    assert service.list_groups("Iterator<Item = T>") == ("Combinators",)


def test_concurrent_readers_see_whole_catalogs(builtin_catalog: Catalog, sample_records: list[JSONValue]) -> None:
    alternate = load(sample_records)
    holder = CatalogHolder(builtin_catalog)
    valid = {builtin_catalog.type_names, alternate.type_names}

    def read(_: int) -> tuple[str, ...]:
        return holder.current.type_names

    def flip(index: int) -> None:
        holder.replace(alternate if index % 2 else builtin_catalog)

    with ThreadPoolExecutor(max_workers=4) as pool:
        flips = [pool.submit(flip, index) for index in range(20)]
        observed = list(pool.map(read, range(200)))
        for future in flips:
            future.result()

    assert set(observed) <= valid
