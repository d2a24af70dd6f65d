"""Table domain - columns plus the keys, indexes and checks derived from them."""

from typing import Any

from pydantic import BaseModel, Field

from yaml2ddl.domain.column import Column, Reference
from yaml2ddl.domain.placeholders import (
    find_path_placeholders,
    substitute_path_placeholders,
)
from yaml2ddl.errors import UnresolvedPlaceholderError


class Table(BaseModel):
    """
    A fully-built table ready for DDL rendering.

    Key properties:
    - Columns keep declaration order
    - Primary key, index and reference orderings are derived, never stored
    - Table-level ``refers`` targets are already dictionary-translated
    """

    logical_name: str | None = None
    physical_name: str | None = None
    comment: str = ""

    columns: tuple[Column, ...] = ()
    check_expressions: tuple[str, ...] = ()

    # None means the document declares no references at all
    refers: tuple[str, ...] | None = None

    source_file: str | None = Field(None, description="Document the table came from")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        """Logical name as printed in the table comment."""
        return self.logical_name or ""

    @property
    def sql_table_name(self) -> str:
        """Physical name as emitted into SQL (empty when unknown)."""
        return self.physical_name or ""

    def primary_key(self) -> list[Column]:
        """Primary key columns, ascending by rank."""
        return sorted(
            (c for c in self.columns if c.primary_key_rank is not None),
            key=lambda c: c.primary_key_rank,  # type: ignore[arg-type, return-value]
        )

    def index_keys(self) -> list[str]:
        """Distinct index keys across all columns, sorted by key name."""
        return sorted({m.key for c in self.columns for m in c.index_memberships})

    def index(self, key: str) -> list[Column]:
        """Columns of one index, ascending by their rank in it."""
        return sorted(
            (c for c in self.columns if c.index_rank(key) is not None),
            key=lambda c: c.index_rank(key),  # type: ignore[arg-type, return-value]
        )

    def table_references(self) -> list[str] | None:
        """Referenced table names, or None when the table declares none."""
        if self.refers is None:
            return None
        return list(self.refers)

    def references_to(self, table_index: Any) -> list[Reference]:
        """
        All column references to one target, ascending by ``order``.

        Columns are scanned in declaration order, so references with equal
        order keep that order.
        """
        matches = [
            ref
            for column in self.columns
            for ref in column.references
            if ref.table_index == table_index
        ]
        return sorted(matches, key=lambda r: r.order)

    def get_column(self, logical_name: str) -> Column | None:
        for column in self.columns:
            if column.logical_name == logical_name:
                return column
        return None

    def _resolve_path(self, path: str) -> str | None:
        column = self.get_column(path)
        return column.physical_name if column else None

    def unresolved_placeholders(self) -> list[str]:
        """Placeholder paths in table checks that match no column."""
        return [
            path
            for expression in self.check_expressions
            for path in find_path_placeholders(expression)
            if self.get_column(path) is None
        ]

    def checks(self, strict: bool = False) -> list[str]:
        """
        Table check expressions with ``<logical.path>`` placeholders resolved.

        Unresolved placeholders become empty strings unless ``strict`` is set,
        in which case UnresolvedPlaceholderError is raised.
        """
        if strict:
            unresolved = self.unresolved_placeholders()
            if unresolved:
                raise UnresolvedPlaceholderError(unresolved)
        return [
            substitute_path_placeholders(e, self._resolve_path)
            for e in self.check_expressions
        ]

    def summary(self) -> str:
        return (
            f"Table({self.physical_name}): "
            f"{len(self.columns)} columns, "
            f"{len(self.primary_key())} primary key columns, "
            f"{len(self.index_keys())} indexes, "
            f"{len(self.check_expressions)} checks"
        )
