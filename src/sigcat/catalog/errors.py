# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by signature catalog operations."""

from __future__ import annotations


class CatalogIntegrityError(RuntimeError):
    """Raised when catalog data violates semantic invariants."""

    def __init__(self, message: str | None = None) -> None:
        """Create the integrity error with an optional ``message``."""

        super().__init__(message or "catalog integrity violation")


class CatalogValidationError(RuntimeError):
    """Raised when a catalog document fails structural schema validation."""


class LoadError(CatalogIntegrityError):
    """Base class for every failure reported by the catalog loader."""


class MalformedRecord(LoadError):
    """Raised when a raw record does not have the expected shape."""

    def __init__(self, context: str, reason: str) -> None:
        self.context = context
        self.reason = reason
        super().__init__(f"{context}: {reason}")


class EmptyTypeName(LoadError):
    """Raised when a record declares an empty ``typeName``."""

    def __init__(self, context: str) -> None:
        self.context = context
        super().__init__(f"{context}: type name must not be empty")


class EmptyGroupName(LoadError):
    """Raised when a group declares an empty ``name``."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"{type_name}: group name must not be empty")


class DuplicateGroupName(LoadError):
    """Raised when a type declares the same group twice."""

    def __init__(self, type_name: str, group_name: str) -> None:
        self.type_name = type_name
        self.group_name = group_name
        super().__init__(f"{type_name}: duplicate group '{group_name}'")


class EmptyOperationList(LoadError):
    """Raised when a group carries no operations."""

    def __init__(self, type_name: str, group_name: str) -> None:
        self.type_name = type_name
        self.group_name = group_name
        super().__init__(f"{type_name}: group '{group_name}' has no operations")


class MalformedSignature(LoadError):
    """Raised when a signature lacks an operation name or parameter list."""

    def __init__(self, raw: str, reason: str | None = None) -> None:
        self.raw = raw
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"malformed signature {raw!r}{detail}")


class DuplicateOperationName(LoadError):
    """Raised when an operation name appears twice within one type."""

    def __init__(self, type_name: str, operation_name: str) -> None:
        self.type_name = type_name
        self.operation_name = operation_name
        super().__init__(f"{type_name}: duplicate operation '{operation_name}'")


class DuplicateTypeName(LoadError):
    """Raised when two records share the same type name."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"duplicate type '{type_name}' in catalog")


__all__ = (
    "CatalogIntegrityError",
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
)
