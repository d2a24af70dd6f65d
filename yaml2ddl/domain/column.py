"""Column domain - one column of a table and its outgoing references."""

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from yaml2ddl.domain.placeholders import substitute_column_placeholder

INDEX_KEY_PATTERN = re.compile(r"^index(\d+)$")


class IndexMembership(BaseModel):
    """A column's membership in a named index, with its position rank."""

    key: str  # e.g. "index1"
    rank: int

    model_config = {"frozen": True}

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not INDEX_KEY_PATTERN.match(v):
            raise ValueError(f"Index key must look like 'index<digits>', got '{v}'")
        return v


class Reference(BaseModel):
    """
    A foreign-key link from a column to a column of another table.

    ``table_index`` identifies the target table and is opaque here: it is
    either a position in the owning table's ``refers`` list or whatever the
    document declares. ``order`` only ranks references to the same target,
    which is how composite foreign keys line up column-for-column.
    """

    table_index: Any = None
    order: int = 0
    column: str | None = None  # local column (owning column's physical name)
    remote_column: str | None = None

    model_config = {"frozen": True}

    def __lt__(self, other: "Reference") -> bool:
        return self.order < other.order


class Column(BaseModel):
    """
    A column with domain attributes already merged in.

    ``logical_name`` is the name as authored (dot-segmented), used for
    comments and table-level check placeholders. ``physical_name`` is what
    appears in SQL.
    """

    logical_name: str | None = Field(None, description="Original dotted name")
    physical_name: str | None = Field(None, description="Name emitted into SQL")
    domain: str | None = None

    type: str | None = None
    size: int | str | None = None
    default: Any = None
    nullable: bool = True
    comment: str = ""

    primary_key_rank: int | None = None
    index_memberships: tuple[IndexMembership, ...] = ()
    check_expressions: tuple[str, ...] = ()
    references: tuple[Reference, ...] = ()

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        """Logical name without separators, as printed in comments."""
        if not self.logical_name:
            return ""
        return self.logical_name.replace(".", "")

    @property
    def is_primary_key(self) -> bool:
        return self.primary_key_rank is not None

    @property
    def indexes(self) -> dict[str, int]:
        """Index key → rank."""
        return {m.key: m.rank for m in self.index_memberships}

    def index_rank(self, key: str) -> int | None:
        for membership in self.index_memberships:
            if membership.key == key:
                return membership.rank
        return None

    @property
    def checks(self) -> list[str]:
        """Check expressions bound to this column's physical name."""
        pname = self.physical_name or ""
        return [substitute_column_placeholder(e, pname) for e in self.check_expressions]
