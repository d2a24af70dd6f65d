"""SQL renderers, one module per kind of DDL statement."""

from yaml2ddl.adapters.ddl.renderers.column import (
    INDENT,
    format_value,
    render_checks,
    render_column,
    render_columns,
    render_default,
    render_null,
    render_size,
)
from yaml2ddl.adapters.ddl.renderers.comment import format_comment, render_comments
from yaml2ddl.adapters.ddl.renderers.foreign_key import render_foreign_keys
from yaml2ddl.adapters.ddl.renderers.index import index_name, render_indexes
from yaml2ddl.adapters.ddl.renderers.table import render_constraints, render_create_table

__all__ = [
    "INDENT",
    "format_comment",
    "format_value",
    "index_name",
    "render_checks",
    "render_column",
    "render_columns",
    "render_comments",
    "render_constraints",
    "render_create_table",
    "render_default",
    "render_foreign_keys",
    "render_indexes",
    "render_null",
    "render_size",
]
