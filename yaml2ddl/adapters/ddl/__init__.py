"""DDL Adapter: Render tables to SQL DDL text."""

from yaml2ddl.adapters.ddl.generator import DDLGenerator, OutputMode

__all__ = ["DDLGenerator", "OutputMode"]
