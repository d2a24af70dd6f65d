"""Foreign key rendering for DDL."""

from yaml2ddl.domain import Table


def render_foreign_keys(table: Table) -> str | None:
    """
    Render one ``alter table ... add foreign key`` per referenced table.

    The i-th entry of the table's ``refers`` list pairs with the column
    references whose target is ``i``, ordered by their ``order``.
    Statements are joined by ``;\\n`` with no trailing terminator.
    Returns None when the table declares no references.
    """
    targets = table.table_references()
    if targets is None:
        return None

    statements = []
    for i, target in enumerate(targets):
        refs = table.references_to(i)
        local = ",".join(r.column or "" for r in refs)
        remote = ",".join(r.remote_column or "" for r in refs)
        statements.append(
            f"alter table {table.sql_table_name} add foreign key({local}) "
            f"references {target}({remote})"
        )
    return ";\n".join(statements)
