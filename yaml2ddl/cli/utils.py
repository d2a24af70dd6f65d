"""CLI utility functions for yaml2ddl."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table as RichTable

from yaml2ddl.cli.formatting import error_panel
from yaml2ddl.config import Y2DConfig
from yaml2ddl.domain import Table
from yaml2ddl.ingestion import SchemaBuilder
from yaml2ddl.ingestion.loader import STDIN_PATH

logger = logging.getLogger(__name__)

# SQL goes to stdout; everything else goes here
console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])


def setup_logging(verbose: bool = False) -> None:
    """Route yaml2ddl logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


def document_options(func: F) -> F:
    """Options shared by every command that reads schema documents."""
    options = [
        click.option(
            "--tab",
            "-t",
            "table_path",
            type=click.Path(path_type=Path, allow_dash=True),
            help="Table document (default from y2d.yml, else table.yaml; '-' for stdin)",
        ),
        click.option(
            "--dic",
            "-d",
            "dictionary_path",
            type=click.Path(path_type=Path),
            help="Dictionary document (default: dict.yaml)",
        ),
        click.option(
            "--dom",
            "-m",
            "domains_path",
            type=click.Path(path_type=Path),
            help="Domain document (default: domains.yaml)",
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to y2d.yml config file (auto-detected if not specified)",
        ),
        click.option(
            "--strict",
            is_flag=True,
            help="Fail on table checks that refer to unknown columns",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Show detailed output"),
        click.option(
            "--debug",
            is_flag=True,
            help="Show full exception stacktraces for troubleshooting",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@dataclass
class DocumentPaths:
    """Resolved document locations for one run."""

    table: Path
    dictionary: Path | None
    domains: Path | None


def _optional_document(
    cli_value: Path | None, config: Y2DConfig, field: str
) -> Path | None:
    """
    Pick a dictionary/domain path.

    Paths named on the command line or in the config file must exist;
    a default path that does not exist is skipped with a warning.
    """
    if cli_value is not None:
        return cli_value

    path = config.resolve(getattr(config, field))
    if path is None or path.exists():
        return path
    if field in config.model_fields_set:
        return path  # explicitly configured: let loading report it

    logger.warning("No %s document at %s, continuing without it", field, path)
    return None


def resolve_documents(
    config: Y2DConfig,
    table_path: Path | None,
    dictionary_path: Path | None,
    domains_path: Path | None,
) -> DocumentPaths:
    """Combine command-line paths with config values (command line wins)."""
    return DocumentPaths(
        table=table_path if table_path is not None else config.table_path,
        dictionary=_optional_document(dictionary_path, config, "dictionary"),
        domains=_optional_document(domains_path, config, "domains"),
    )


def load_table(paths: DocumentPaths) -> Table:
    """Load the documents and build the table."""
    logger.debug(
        "Documents: table=%s dictionary=%s domains=%s",
        paths.table,
        paths.dictionary,
        paths.domains,
    )
    table = SchemaBuilder.from_files(paths.table, paths.dictionary, paths.domains)
    if table.physical_name is None and str(paths.table) == STDIN_PATH:
        logger.warning("Table read from stdin has no pname")
    return table


def fail(label: str, error: BaseException, debug: bool) -> click.ClickException:
    """Report an error on the console and wrap it for Click."""
    if debug:
        console.print(traceback.format_exc(), markup=False, highlight=False)
    console.print(error_panel(label, error))
    return click.ClickException(str(error))


def build_summary_table(table: Table) -> RichTable:
    """Build a Rich table describing the columns of a schema table.

    Args:
        table: Table to describe

    Returns:
        Rich Table object for display
    """
    summary = RichTable(
        title=f"{table.physical_name} ({table.name})" if table.name else table.physical_name
    )
    summary.add_column("Column", style="bold")
    summary.add_column("Type")
    summary.add_column("Default")
    summary.add_column("Null")
    summary.add_column("PK", justify="right")
    summary.add_column("Indexes")
    summary.add_column("References")
    summary.add_column("Checks")

    for column in table.columns:
        summary.add_row(
            column.physical_name or "[dim]-[/dim]",
            f"{column.type or ''}{f'({column.size})' if column.size is not None else ''}",
            "" if column.default is None else escape(str(column.default)),
            "yes" if column.nullable else "[red]no[/red]",
            "" if column.primary_key_rank is None else str(column.primary_key_rank),
            ", ".join(f"{m.key}:{m.rank}" for m in column.index_memberships),
            ", ".join(
                f"{r.table_index}.{r.remote_column} (#{r.order})" for r in column.references
            ),
            escape("\n".join(column.checks)),
        )
    return summary
