# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Process-wide holder for the current catalog with atomic reloads."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock

from .loader import load
from .model_catalog import EMPTY_CATALOG, Catalog
from .query import CatalogQueryService
from .types import JSONValue

LOGGER = logging.getLogger(__name__)


class CatalogHolder:
    """Share one catalog between readers and replace it wholesale on reload.

    Readers take the reference returned by :attr:`current` and keep working
    against that value; a concurrent reload never mutates it.
    """

    def __init__(self, catalog: Catalog = EMPTY_CATALOG) -> None:
        self._catalog = catalog
        self._reload_lock = Lock()

    @property
    def current(self) -> Catalog:
        """Return the catalog visible to readers right now."""

        return self._catalog

    def query(self) -> CatalogQueryService:
        """Return a query service bound to the current catalog."""

        return CatalogQueryService(self._catalog)

    def replace(self, catalog: Catalog) -> Catalog:
        """Swap in an already validated ``catalog`` and return it."""

        with self._reload_lock:
            return self._swap(catalog)

    def reload(self, raw_records: Iterable[JSONValue]) -> Catalog:
        """Load ``raw_records`` and swap the result in.

        Args:
            raw_records: Raw records accepted by :func:`sigcat.catalog.loader.load`.

        Returns:
            Catalog: The catalog current after the reload.

        Raises:
            LoadError: If the records are invalid; the previous catalog stays current.
        """

        with self._reload_lock:
            return self._swap(load(raw_records))

    def _swap(self, catalog: Catalog) -> Catalog:
        if catalog.checksum == self._catalog.checksum:
            LOGGER.debug("Catalog unchanged (checksum %s); keeping current value", catalog.checksum[:12])
            return self._catalog
        self._catalog = catalog
        LOGGER.info("Catalog replaced: %d types", len(catalog))
        return catalog


__all__ = ["CatalogHolder"]
