"""Create table rendering for DDL."""

from yaml2ddl.adapters.ddl.renderers.column import INDENT, render_checks, render_columns
from yaml2ddl.domain import Table


def render_constraints(table: Table, indent: int = 0, strict: bool = False) -> str:
    """
    Render the table-level constraint lines.

    The primary key line comes first (only when the table has one), then
    one ``, CHECK(...)`` line per table check.
    """
    prefix = INDENT * indent
    constraints = ""
    pkey = table.primary_key()
    if pkey:
        columns = ", ".join(c.physical_name or "" for c in pkey)
        constraints = (
            f"{prefix}, constraint PK_{table.sql_table_name} primary key({columns})"
        )
    return constraints + render_checks(table.checks(strict), f"\n{prefix}, ")


def render_create_table(table: Table, indent: int = 1, strict: bool = False) -> str:
    """Render ``drop table`` followed by ``create table``."""
    pname = table.sql_table_name
    return (
        f"drop table {pname};\n"
        f"create table {pname} (\n"
        f"{render_columns(table.columns, indent)}\n"
        f"{render_constraints(table, indent, strict)}\n"
        ");\n"
    )
