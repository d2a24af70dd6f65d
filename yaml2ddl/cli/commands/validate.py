"""Validate command for yaml2ddl CLI."""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.markup import escape

from yaml2ddl.adapters.ddl import DDLGenerator
from yaml2ddl.cli import CONTEXT_SETTINGS, ddl_preview, problems_panel, summary_panel
from yaml2ddl.cli.utils import (
    build_summary_table,
    console,
    document_options,
    fail,
    load_table,
    resolve_documents,
    setup_logging,
)
from yaml2ddl.config import load_config
from yaml2ddl.errors import SchemaDocumentError


@click.command(context_settings=CONTEXT_SETTINGS)
@document_options
def validate(
    table_path: Path | None,
    dictionary_path: Path | None,
    domains_path: Path | None,
    config_path: Path | None,
    strict: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Load a table document and report what would be generated.

    Builds the table against the dictionary and domains, prints its
    columns, keys, indexes and references, and warns about table checks
    that name unknown columns. With --strict those warnings fail the run.

    Examples:

        y2d validate --tab customer.yaml

        y2d validate --tab customer.yaml --strict
    """
    setup_logging(verbose)

    try:
        cfg = load_config(config_path)
        paths = resolve_documents(cfg, table_path, dictionary_path, domains_path)
        table = load_table(paths)
    except FileNotFoundError as e:
        raise fail("File not found", e, debug)
    except yaml.YAMLError as e:
        raise fail("YAML parsing error", e, debug)
    except SchemaDocumentError as e:
        raise fail("Schema document error", e, debug)
    except ValidationError as e:
        raise fail("Validation error", e, debug)

    strict = strict or cfg.strict_checks

    console.print()
    console.print(build_summary_table(table))

    pkey = table.primary_key()
    if pkey:
        console.print(
            f"[dim]Primary key:[/dim] {', '.join(c.physical_name or '' for c in pkey)}"
        )
    for key in table.index_keys():
        members = ", ".join(c.physical_name or "" for c in table.index(key))
        console.print(f"[dim]{key}:[/dim] {members}")
    for i, target in enumerate(table.table_references() or []):
        columns = ", ".join(r.column or "" for r in table.references_to(i))
        console.print(f"[dim]References {escape(target)}:[/dim] {columns}")

    if verbose and table.physical_name is not None:
        console.print()
        console.print(ddl_preview(DDLGenerator().generate(table)))

    problems = []
    if table.physical_name is None:
        problems.append("Table has no physical name (add 'pname')")
    unresolved = table.unresolved_placeholders()
    if unresolved:
        problems.append(
            "Check placeholders match no column: "
            + ", ".join(f"<{p}>" for p in unresolved)
        )

    console.print()
    if problems:
        console.print(problems_panel(problems))
        if strict:
            raise click.ClickException(f"{len(problems)} problem(s) found")
        return

    console.print(summary_panel(table))
