# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the signature catalog."""

from __future__ import annotations

from typing import Final

from .errors import (
    CatalogIntegrityError,
    CatalogValidationError,
    DuplicateGroupName,
    DuplicateOperationName,
    DuplicateTypeName,
    EmptyGroupName,
    EmptyOperationList,
    EmptyTypeName,
    LoadError,
    MalformedRecord,
    MalformedSignature,
)
from .holder import CatalogHolder
from .loader import CatalogLoader, load
from .model_catalog import Catalog, OperationGroup, TypeEntry
from .query import CatalogQueryService, NotFound, SearchHit, SearchResults
from .signature import OperationSignature, ParsedSignature, parse_signature

__all__: Final[tuple[str, ...]] = (
    "Catalog",
    "CatalogHolder",
    "CatalogIntegrityError",
    "CatalogLoader",
    "CatalogQueryService",
    "CatalogValidationError",
    "DuplicateGroupName",
    "DuplicateOperationName",
    "DuplicateTypeName",
    "EmptyGroupName",
    "EmptyOperationList",
    "EmptyTypeName",
    "LoadError",
    "MalformedRecord",
    "MalformedSignature",
    "NotFound",
    "OperationGroup",
    "OperationSignature",
    "ParsedSignature",
    "SearchHit",
    "SearchResults",
    "TypeEntry",
    "load",
    "parse_signature",
)
