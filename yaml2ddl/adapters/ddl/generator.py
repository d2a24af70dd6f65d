"""DDL Generator - orchestrates SQL text generation from Tables."""

import logging
from enum import Enum
from pathlib import Path

from yaml2ddl.adapters.ddl.renderers import (
    render_comments,
    render_create_table,
    render_foreign_keys,
    render_indexes,
)
from yaml2ddl.domain import Table

logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    """What a generation run emits."""

    TABLE = "table"  # drop/create table followed by comments
    INDEX = "index"  # create index statements only
    FOREIGN_KEYS = "foreign-keys"  # alter table ... add foreign key only


class DDLGenerator:
    """
    Generate DDL text for a Table.

    Produces:
    - drop/create table with primary key and check constraints
    - comment on table / column
    - create index per index key
    - alter table ... add foreign key per referenced table

    The generator holds settings only; every call renders from the table.
    """

    def __init__(self, indent: int = 1, strict: bool = False) -> None:
        self.indent = indent
        self.strict = strict

    def generate_table(self, table: Table) -> str:
        return render_create_table(table, self.indent, self.strict)

    def generate_comments(self, table: Table) -> str:
        return render_comments(table)

    def generate_indexes(self, table: Table) -> str:
        return render_indexes(table)

    def generate_foreign_keys(self, table: Table) -> str | None:
        return render_foreign_keys(table)

    def generate(self, table: Table, mode: OutputMode = OutputMode.TABLE) -> str:
        """
        Generate the full text for one output mode.

        Index and foreign-key modes produce '' when the table has nothing
        to emit. Foreign-key statements are terminated with ``;``.
        """
        if table.physical_name is None:
            logger.warning("Table %s has no physical name", table.name or "<unnamed>")

        if mode == OutputMode.INDEX:
            if not table.index_keys():
                logger.info("Table %s declares no indexes", table.physical_name)
                return ""
            return self.generate_indexes(table)

        if mode == OutputMode.FOREIGN_KEYS:
            foreign_keys = self.generate_foreign_keys(table)
            if not foreign_keys:
                logger.info("Table %s declares no references", table.physical_name)
                return ""
            return foreign_keys + ";\n"

        return self.generate_table(table) + self.generate_comments(table)

    def generate_and_write(
        self,
        table: Table,
        output_file: str | Path,
        mode: OutputMode = OutputMode.TABLE,
        encoding: str = "utf-8",
    ) -> Path:
        """
        Generate DDL and write it to disk.

        Returns the written file path.
        """
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        content = self.generate(table, mode)
        output_path.write_bytes(content.encode(encoding))
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return output_path
