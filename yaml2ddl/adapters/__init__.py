"""Adapters: Render domain models to destination formats (SQL DDL)."""

from yaml2ddl.adapters.ddl import DDLGenerator, OutputMode

__all__ = ["DDLGenerator", "OutputMode"]
