# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for catalog CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..catalog import Catalog, OperationSignature, SearchHit, TypeEntry


def build_types_table(catalog: Catalog) -> Table:
    """Return a table summarising every type in ``catalog``."""

    table = Table(title="Types", box=box.SIMPLE, expand=True)
    table.add_column("Type", style="bold", overflow="fold")
    table.add_column("Groups", overflow="fold")
    table.add_column("Operations", justify="right")
    for entry in catalog:
        table.add_row(Text(entry.type_name), Text(", ".join(entry.group_names) or "-"), str(len(entry.operations)))
    return table


def build_entry_table(entry: TypeEntry) -> Table:
    """Return a table listing the operations of ``entry`` in presentation order."""

    table = Table(title=Text(entry.type_name), box=box.SIMPLE, expand=True)
    table.add_column("Group", style="bold", no_wrap=True)
    table.add_column("Signature", overflow="fold")
    for group in entry.groups:
        for signature in group.items:
            table.add_row(Text(group.name), Text(signature.raw))
    for signature in entry.ungrouped_items:
        table.add_row("-", Text(signature.raw))
    return table


def render_signature(console: Console, signature: OperationSignature, *, details: bool) -> None:
    """Print ``signature`` and optionally its parsed parts."""

    console.print(Text(signature.raw))
    if not details:
        return
    parsed = signature.parsed
    console.print(Text(f"  name: {parsed.name}"))
    console.print(Text(f"  receiver: {'self' if parsed.takes_self else 'none'}"))
    console.print(Text(f"  parameters: {', '.join(parsed.parameters) or '-'}"))
    console.print(Text(f"  returns: {parsed.return_type or '-'}"))
    console.print(Text(f"  constraints: {parsed.constraints or '-'}"))


def render_hits(console: Console, hits: Iterable[SearchHit]) -> int:
    """Print each search hit on its own line and return how many were printed."""

    count = 0
    for hit in hits:
        console.print(Text(f"{hit.type_name}: {hit.raw}"))
        count += 1
    return count


__all__ = [
    "build_entry_table",
    "build_types_table",
    "render_hits",
    "render_signature",
]
