# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application exposing catalog queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console

from ..catalog import (
    Catalog,
    CatalogHolder,
    CatalogIntegrityError,
    CatalogLoader,
    CatalogQueryService,
    CatalogValidationError,
    NotFound,
)
from ..config import ConfigError, SigcatConfig, load_config
from ..console import get_console_manager
from ..logging import configure_logging, fail, ok, warn
from .rendering import build_entry_table, build_types_table, render_hits, render_signature
from .typer_ext import create_typer

EXIT_NOT_FOUND: Final[int] = 1
EXIT_LOAD_ERROR: Final[int] = 2

app = create_typer(help="Query and validate operation signature catalogs.", no_args_is_help=True)


@dataclass(slots=True)
class CLIState:
    """Options shared by every command."""

    config: SigcatConfig
    root: Path
    catalogs: tuple[Path, ...] = ()
    use_color: bool = True
    use_emoji: bool = True
    holder: CatalogHolder = field(default_factory=CatalogHolder)

    @property
    def console(self) -> Console:
        """Return the console matching the presentation flags."""

        return get_console_manager().get(color=self.use_color, emoji=self.use_emoji)

    def sources(self, extra: tuple[Path, ...] = ()) -> tuple[Path, ...]:
        """Return the documents to load, command arguments taking precedence."""

        if extra:
            return extra
        if self.catalogs:
            return self.catalogs
        return tuple(self.config.resolve_sources(self.root))

    def load(self, extra: tuple[Path, ...] = ()) -> Catalog:
        """Load the configured catalog into the holder or exit with an error.

        Documents passed as ``extra`` are loaded on their own, without the
        bundled catalog.
        """

        loader = CatalogLoader(validate_schema=self.config.validate_schema)
        include_builtin = self.config.include_builtin and not extra
        try:
            catalog = loader.load_paths(self.sources(extra), include_builtin=include_builtin)
        except (CatalogIntegrityError, CatalogValidationError, OSError) as exc:
            self.report_failure(f"Failed to load catalog: {exc}")
            raise typer.Exit(code=EXIT_LOAD_ERROR) from exc
        return self.holder.replace(catalog)

    def query(self) -> CatalogQueryService:
        """Load the catalog and return a query service over it."""

        self.load()
        return self.holder.query()

    def report_failure(self, message: str) -> None:
        fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def not_found(self, missing: NotFound) -> typer.Exit:
        """Report ``missing`` and return the exit signal to raise."""

        self.report_failure(missing.describe())
        return typer.Exit(code=EXIT_NOT_FOUND)


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):  # pragma: no cover - callback always runs first
        raise typer.Exit(code=EXIT_LOAD_ERROR)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root holding sigcat configuration.")] = Path(),
    catalog: Annotated[
        list[Path] | None,
        typer.Option("--catalog", "-c", help="Catalog document to load; overrides configured sources."),
    ] = None,
    no_builtin: Annotated[bool, typer.Option("--no-builtin", help="Skip the bundled Iterator catalog.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Emit debug logging.")] = False,
) -> None:
    """Query and validate operation signature catalogs."""

    configure_logging(verbose=verbose)
    try:
        config = load_config(root)
    except ConfigError as exc:
        fail(str(exc), use_emoji=not no_emoji, use_color=not no_color)
        raise typer.Exit(code=EXIT_LOAD_ERROR) from exc
    if no_builtin:
        config.include_builtin = False
    ctx.obj = CLIState(
        config=config,
        root=root,
        catalogs=tuple(catalog or ()),
        use_color=config.output.color and not no_color,
        use_emoji=config.output.emoji and not no_emoji,
    )


@app.command("types")
def types_command(ctx: typer.Context) -> None:
    """List every type in the catalog."""

    state = _state(ctx)
    state.console.print(build_types_table(state.query().catalog))


@app.command("show")
def show_command(
    ctx: typer.Context,
    type_name: Annotated[str, typer.Argument(help="Exact type name, e.g. 'Iterator<Item = T>'.")],
) -> None:
    """Show every operation declared by a type."""

    state = _state(ctx)
    entry = state.query().get_type(type_name)
    if isinstance(entry, NotFound):
        raise state.not_found(entry)
    state.console.print(build_entry_table(entry))


@app.command("groups")
def groups_command(
    ctx: typer.Context,
    type_name: Annotated[str, typer.Argument(help="Exact type name.")],
) -> None:
    """List the group names of a type in presentation order."""

    state = _state(ctx)
    groups = state.query().list_groups(type_name)
    if isinstance(groups, NotFound):
        raise state.not_found(groups)
    for name in groups:
        state.console.print(name, markup=False, highlight=False)


@app.command("find")
def find_command(
    ctx: typer.Context,
    type_name: Annotated[str, typer.Argument(help="Exact type name.")],
    operation: Annotated[str, typer.Argument(help="Operation name, e.g. 'map'.")],
    details: Annotated[bool, typer.Option("--details", "-d", help="Show the parsed signature parts.")] = False,
) -> None:
    """Print the signature of one operation."""

    state = _state(ctx)
    signature = state.query().find_operation(type_name, operation)
    if isinstance(signature, NotFound):
        raise state.not_found(signature)
    render_signature(state.console, signature, details=details)


@app.command("search")
def search_command(
    ctx: typer.Context,
    substring: Annotated[str, typer.Argument(help="Case-sensitive text to look for; empty matches all.")] = "",
) -> None:
    """List signatures containing a substring."""

    state = _state(ctx)
    count = render_hits(state.console, state.query().search(substring))
    if not count:
        warn(f"No signatures contain {substring!r}", use_emoji=state.use_emoji, use_color=state.use_color)


@app.command("validate")
def validate_command(
    ctx: typer.Context,
    paths: Annotated[list[Path] | None, typer.Argument(help="Catalog documents to validate.")] = None,
) -> None:
    """Validate catalog documents and report a summary."""

    state = _state(ctx)
    catalog = state.load(tuple(paths or ()))
    operations = sum(len(entry.operations) for entry in catalog)
    ok(
        f"Catalog valid: {len(catalog)} types, {operations} operations (checksum {catalog.checksum[:12]})",
        use_emoji=state.use_emoji,
        use_color=state.use_color,
    )


__all__ = ["app"]
