"""
CLI utility helpers: output formatting and context construction.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from arc42.core.settings import get_settings
from arc42.locales import build_default_provider
from arc42.ops.context import ToolContext
from arc42.ops.result import OperationResult

console = Console()
err_console = Console(stderr=True)


# ── Context helper ───────────────────────────────────────────────────────


def make_context(project: str | Path | None = None) -> ToolContext:
    """Create a ``ToolContext`` for CLI commands; ``project`` overrides ``ARC42_PROJECT_PATH``."""
    settings = get_settings()
    if project is not None:
        settings = settings.model_copy(update={"project_path": Path(project)})
    return ToolContext.from_settings(settings, build_default_provider(), caller="cli")


# ── Output helpers ───────────────────────────────────────────────────────


def _fail(result: OperationResult) -> None:
    err = result.error
    code = err.code if err else "ERROR"
    err_console.print(f"[bold red]Error[/bold red] ({code}): {escape(result.message)}")
    raise typer.Exit(code=1)


def print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str, ensure_ascii=False))


def output_result(
    result: OperationResult,
    *,
    as_json: bool = False,
    title: str = "",
    text_key: str | None = None,
) -> None:
    """Render an ``OperationResult`` to the terminal.

    With ``text_key`` the named payload field (a template, a guide) is
    printed verbatim instead of as key/value pairs.
    """
    if as_json:
        print_json(result.to_dict())
        if not result.success:
            raise typer.Exit(code=1)
        return

    if not result.success:
        _fail(result)

    data = result.data or {}
    if text_key is not None:
        console.print(data[text_key], markup=False, emoji=False, highlight=False, soft_wrap=True)
    else:
        _print_dict(data, title=title)
    print_footer(result)


def print_footer(result: OperationResult) -> None:
    """Success message and suggested next steps, on stderr."""
    if result.message:
        err_console.print(f"[green]{escape(result.message)}[/green]")
    for warning in result.warnings:
        err_console.print(f"[yellow]⚠ {escape(warning)}[/yellow]")
    for step in result.next_steps:
        err_console.print(f"  [dim]→ {escape(step)}[/dim]")


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row.values()))
    console.print(table)


# ── Private helpers ──────────────────────────────────────────────────────


def _print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    for k, v in data.items():
        if isinstance(v, dict | list):
            v = json.dumps(v, default=str, ensure_ascii=False)
        console.print(f"  [cyan]{k}[/cyan]: {escape(str(v))}", highlight=False)
