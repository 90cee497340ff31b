"""
CLI utility helpers - output formatting and option resolution.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from seqid.core.timestamps import from_iso8601

console = Console()
err_console = Console(stderr=True)


# ── Option helpers ───────────────────────────────────────────────────────


def parse_origin(value: str | None) -> datetime | None:
    """Parse an ``--origin`` option, exiting with a readable error on bad input."""
    if value is None:
        return None
    try:
        return from_iso8601(value)
    except ValueError:
        err_console.print(f"[bold red]Error[/bold red]: --origin is not ISO 8601: {value!r}")
        raise typer.Exit(code=2) from None


# ── Output helpers ───────────────────────────────────────────────────────


def output_rows(
    rows: list[dict[str, Any]],
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render rows as JSON or as a Rich table."""
    if as_json:
        console.print_json(json.dumps(rows, default=str))
        return

    if not rows:
        console.print("[dim]No items.[/dim]")
        return

    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(str(v) for v in row.values()))
    console.print(table)
