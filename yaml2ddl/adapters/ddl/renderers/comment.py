"""Comment rendering for DDL."""

from yaml2ddl.adapters.ddl.renderers.column import INDENT
from yaml2ddl.domain import Table


def format_comment(comment: str) -> str:
    if comment == "":
        return ""
    return "\t " + comment


def render_comments(table: Table, indent: int = 0) -> str:
    """Render the table comment and one comment per column, in column order."""
    prefix = INDENT * indent
    lines = [
        f"{prefix}comment on table {table.sql_table_name} is "
        f"'{table.name}{format_comment(table.comment)}';\n"
    ]
    for column in table.columns:
        lines.append(
            f"{prefix}comment on column {table.sql_table_name}.{column.physical_name or ''} "
            f"is '{column.name}{format_comment(column.comment)}';\n"
        )
    return "".join(lines)
