# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from sigcat.catalog import Catalog, CatalogLoader, CatalogQueryService
from sigcat.catalog.types import JSONValue


@pytest.fixture
def builtin_catalog() -> Catalog:
    """Return the catalog bundled with the package."""
    return CatalogLoader().load_builtin()


@pytest.fixture
def builtin_query(builtin_catalog: Catalog) -> CatalogQueryService:
    """Return a query service over the bundled catalog."""
    return CatalogQueryService(builtin_catalog)


@pytest.fixture
def sample_records() -> list[JSONValue]:
    """Return two small records declared out of alphabetical order."""
    return [
        {
            "typeName": "Stream<Item = T>",
            "groups": [{"name": "Adapters", "items": ["map((T) -> U) -> Stream<Item = U>"]}],
            "items": ["next() -> Option<T>", "::empty() -> Self"],
        },
        {
            "typeName": "Deque<T>",
            "items": ["push_back(T) -> ()", "pop_front() -> Option<T>", "len() -> usize"],
        },
    ]

