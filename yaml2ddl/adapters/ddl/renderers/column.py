"""Column rendering for DDL.

Each helper returns a fragment of a column definition; an absent
attribute renders as the empty string.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from yaml2ddl.domain import Column

INDENT = " " * 2


def format_value(value: Any) -> str:
    """Render a document scalar as SQL text (booleans in lower case)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_size(column: Column) -> str:
    """``(<size>)`` or ''."""
    if column.size is None:
        return ""
    return f"({format_value(column.size)})"


def render_default(column: Column) -> str:
    """``DEFAULT <value>`` or ''."""
    if column.default is None:
        return ""
    return f"DEFAULT {format_value(column.default)}"


def render_null(column: Column) -> str:
    """`` NOT NULL`` for non-nullable columns, else ''."""
    return "" if column.nullable else " NOT NULL"


def render_checks(checks: Iterable[str], separator: str = " ") -> str:
    """One ``CHECK(<expr>)`` clause per expression, each after ``separator``."""
    return "".join(f"{separator}CHECK({check})" for check in checks)


def render_column(column: Column, indent: int = 0) -> str:
    """Render one column line of a create table statement."""
    return (
        f"{INDENT * indent}{column.physical_name or ''} {column.type or ''}"
        f"{render_size(column)} {render_default(column)}{render_null(column)}"
        f"{render_checks(column.checks)}"
    )


def render_columns(columns: Sequence[Column], indent: int = 0) -> str:
    """Render column lines joined by ``,\\n``."""
    return ",\n".join(render_column(c, indent) for c in columns)
