"""Command-line interface for yaml2ddl."""

from __future__ import annotations

import click

from yaml2ddl.cli import CONTEXT_SETTINGS
from yaml2ddl.cli.commands import generate, validate


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="yaml2ddl")
def cli() -> None:
    """Generate SQL DDL from YAML schema documents.

    Tables, a name dictionary and column domains are kept as YAML;
    this tool turns them into create table, comment, index and foreign
    key statements.

        $ y2d generate --tab customer.yaml

    Or with an explicit config:

        $ y2d generate --config ./y2d.yml
    """


cli.add_command(generate)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
