"""Index rendering for DDL."""

from yaml2ddl.domain import INDEX_KEY_PATTERN, Table


def index_name(table: Table, key: str) -> str:
    """``I_<table><n>`` for index key ``index<n>``."""
    match = INDEX_KEY_PATTERN.match(key)
    if match is None:
        raise ValueError(f"Not an index key: '{key}'")
    return f"I_{table.sql_table_name}{match.group(1)}"


def render_indexes(table: Table) -> str:
    """One ``create index`` line per index key, keys in sorted order."""
    return "".join(
        f"create index {index_name(table, key)} on {table.sql_table_name}"
        f"({', '.join(c.physical_name or '' for c in table.index(key))});\n"
        for key in table.index_keys()
    )
