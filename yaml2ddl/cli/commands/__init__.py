"""CLI commands for yaml2ddl.

This package contains all CLI command definitions, organized by functionality.
Commands are registered by importing them in __main__.py.
"""

from __future__ import annotations

from yaml2ddl.cli.commands.generate import generate
from yaml2ddl.cli.commands.validate import validate

__all__ = [
    "generate",
    "validate",
]
