"""Generate command for yaml2ddl CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from yaml2ddl.adapters.ddl import DDLGenerator, OutputMode
from yaml2ddl.cli import CONTEXT_SETTINGS
from yaml2ddl.cli.utils import (
    console,
    document_options,
    fail,
    load_table,
    resolve_documents,
    setup_logging,
)
from yaml2ddl.config import load_config
from yaml2ddl.errors import SchemaDocumentError

logger = logging.getLogger(__name__)


@click.command(context_settings=CONTEXT_SETTINGS)
@document_options
@click.option(
    "--index",
    "-i",
    is_flag=True,
    help="Emit create index statements only",
)
@click.option(
    "--foreign-keys",
    "-f",
    is_flag=True,
    help="Emit foreign key statements only",
)
@click.option(
    "--encoding",
    "-e",
    help="Output encoding (default from y2d.yml or Y2D_ENCODING, else utf-8)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write DDL to this file instead of stdout",
)
def generate(
    table_path: Path | None,
    dictionary_path: Path | None,
    domains_path: Path | None,
    config_path: Path | None,
    strict: bool,
    verbose: bool,
    debug: bool,
    index: bool,
    foreign_keys: bool,
    encoding: str | None,
    output: Path | None,
) -> None:
    """Generate DDL for a table document.

    By default emits drop/create table followed by table and column
    comments. With --index, emits only create index statements (nothing
    when the table has no index keys). With --foreign-keys, emits only
    alter table statements for the table's references.

    Examples:

        # Create table + comments using dict.yaml and domains.yaml
        y2d generate --tab customer.yaml

        # Index statements only
        y2d generate --tab customer.yaml --index

        # Console output for a Shift_JIS terminal
        y2d generate --tab customer.yaml --encoding cp932

        # Read the table from stdin
        cat customer.yaml | y2d generate --tab -
    """
    setup_logging(verbose)

    if index and foreign_keys:
        raise click.UsageError("--index and --foreign-keys are mutually exclusive")
    mode = OutputMode.TABLE
    if index:
        mode = OutputMode.INDEX
    elif foreign_keys:
        mode = OutputMode.FOREIGN_KEYS

    try:
        cfg = load_config(config_path)
    except FileNotFoundError as e:
        raise fail("Config file not found", e, debug)
    except yaml.YAMLError as e:
        raise fail("YAML parsing error", e, debug)
    except ValidationError as e:
        raise fail("Config validation error", e, debug)

    strict = strict or cfg.strict_checks
    encoding = encoding or cfg.encoding

    try:
        paths = resolve_documents(cfg, table_path, dictionary_path, domains_path)
        table = load_table(paths)
    except FileNotFoundError as e:
        raise fail("File not found", e, debug)
    except yaml.YAMLError as e:
        raise fail("YAML parsing error", e, debug)
    except SchemaDocumentError as e:
        raise fail("Schema document error", e, debug)
    except ValidationError as e:
        raise fail("Model validation error", e, debug)

    if table.physical_name is None:
        raise click.ClickException(
            "Table has no physical name: add 'pname' to the table document"
        )

    if not strict:
        for path in table.unresolved_placeholders():
            logger.warning("Check placeholder <%s> matches no column", path)

    generator = DDLGenerator(strict=strict)
    try:
        if output is not None:
            written = generator.generate_and_write(table, output, mode, encoding)
            if verbose:
                console.print(f"[green]Wrote[/green] {written}")
            return

        text = generator.generate(table, mode)
        if not text:
            return
        stdout = click.get_binary_stream("stdout")
        stdout.write(text.encode(encoding))
        stdout.flush()
    except SchemaDocumentError as e:
        raise fail("Schema document error", e, debug)
    except (UnicodeEncodeError, LookupError) as e:
        raise fail(f"Cannot encode output as {encoding}", e, debug)
