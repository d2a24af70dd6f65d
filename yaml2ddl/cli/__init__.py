"""CLI utilities for yaml2ddl.

This package provides the Rich panels shared by the CLI commands.
"""

from __future__ import annotations

from yaml2ddl.cli.formatting import (
    ddl_preview,
    error_panel,
    problems_panel,
    summary_panel,
)

# Wider help text than Click's default of 80 columns
CONTEXT_SETTINGS = {"max_content_width": 88}

__all__ = [
    "CONTEXT_SETTINGS",
    "ddl_preview",
    "error_panel",
    "problems_panel",
    "summary_panel",
]