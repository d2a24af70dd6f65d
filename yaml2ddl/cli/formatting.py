"""Rich panels for yaml2ddl command output.

Errors, validation problems and the table summary are shown as panels
on stderr; generated DDL can be previewed with SQL highlighting.
"""

from __future__ import annotations

import reprlib
from collections.abc import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from yaml2ddl.domain import Table
from yaml2ddl.errors import MissingFieldError, ShapeError, UnresolvedPlaceholderError

PANEL_WIDTH = 78

_node_repr = reprlib.Repr()
_node_repr.maxstring = 40
_node_repr.maxother = 40


def _error_details(error: BaseException) -> list[str]:
    """Extra lines for the schema errors that carry the offending part."""
    if isinstance(error, MissingFieldError):
        return [f"Missing element: [bold]{escape(error.field)}[/bold]"]
    if isinstance(error, ShapeError):
        return [
            f"Found {type(error.node).__name__}: {escape(_node_repr.repr(error.node))}"
        ]
    if isinstance(error, UnresolvedPlaceholderError):
        return ["No column declares:"] + [f"  • <{escape(p)}>" for p in error.paths]
    return []


def error_panel(label: str, error: BaseException) -> Panel:
    """
    Build the panel shown when a command fails.

    Args:
        label: Short description of what failed (panel title)
        error: The exception being reported

    Returns:
        Panel with the error message and any schema details
    """
    lines = [f"[bold red]{escape(str(error))}[/bold red]"]
    details = _error_details(error)
    if details:
        lines.append("")
        lines.extend(f"[dim]{line}[/dim]" for line in details)
    return Panel(
        "\n".join(lines),
        title=f"[bold red]{escape(label)}[/bold red]",
        border_style="red",
        width=PANEL_WIDTH,
        expand=False,
    )


def problems_panel(problems: Sequence[str]) -> Panel:
    """List validation problems, one bullet each."""
    content = "\n".join(f"[yellow]•[/yellow] {escape(p)}" for p in problems)
    return Panel(
        content,
        title=f"[bold yellow]{len(problems)} problem(s)[/bold yellow]",
        border_style="yellow",
        width=PANEL_WIDTH,
        expand=False,
    )


def summary_panel(table: Table) -> Panel:
    return Panel(
        f"[bold green]✓ {escape(table.summary())}[/bold green]",
        title="[bold green]Valid[/bold green]",
        border_style="green",
        width=PANEL_WIDTH,
        expand=False,
    )


def ddl_preview(ddl: str) -> Syntax:
    """Highlight generated DDL for the console."""
    return Syntax(
        ddl, "sql", theme="monokai", background_color="default", word_wrap=True
    )
