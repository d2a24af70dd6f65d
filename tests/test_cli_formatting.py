"""Tests for the Rich panels used by the CLI."""

import io

import click
from rich.console import Console

from yaml2ddl.__main__ import cli
from yaml2ddl.cli import (
    CONTEXT_SETTINGS,
    ddl_preview,
    error_panel,
    problems_panel,
    summary_panel,
)
from yaml2ddl.domain import Column, Table
from yaml2ddl.errors import MissingFieldError, ShapeError, UnresolvedPlaceholderError


def render(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestErrorPanel:
    """Tests for error_panel."""

    def test_plain_error(self):
        text = render(error_panel("File not found", FileNotFoundError("nope.yaml")))
        assert "File not found" in text
        assert "nope.yaml" in text

    def test_missing_field(self):
        text = render(error_panel("Schema document error", MissingFieldError("columns")))
        assert "columns element doesn't exist." in text
        assert "Missing element: columns" in text

    def test_shape_error_shows_node(self):
        error = ShapeError("table must be a mapping", node=["a", "b"])
        text = render(error_panel("Schema document error", error))
        assert "Found list: ['a', 'b']" in text

    def test_unresolved_placeholders_listed(self):
        error = UnresolvedPlaceholderError(["word9", "word8.x"])
        text = render(error_panel("Schema document error", error))
        assert "• <word9>" in text
        assert "• <word8.x>" in text

    def test_markup_in_message_is_escaped(self):
        text = render(error_panel("YAML parsing error", ValueError("bad [red]tag[/red]")))
        assert "bad [red]tag[/red]" in text


class TestValidatePanels:
    """Tests for the validate command panels."""

    def test_problems_panel(self):
        text = render(problems_panel(["Table has no physical name (add 'pname')", "x"]))
        assert "2 problem(s)" in text
        assert "• Table has no physical name (add 'pname')" in text

    def test_summary_panel(self):
        table = Table(physical_name="T", columns=(Column(physical_name="A", primary_key_rank=1),))
        text = render(summary_panel(table))
        assert "Valid" in text
        assert "Table(T): 1 columns, 1 primary key columns" in text

    def test_ddl_preview(self):
        assert "create table T" in render(ddl_preview("create table T (\n  A number\n);\n"))


class TestHelpWidth:
    """Tests for the shared Click context settings."""

    def test_commands_share_context_settings(self):
        ctx = click.Context(cli, **CONTEXT_SETTINGS)
        assert ctx.max_content_width == 88
        for name in ("generate", "validate"):
            assert cli.commands[name].context_settings == CONTEXT_SETTINGS
        assert cli.context_settings == CONTEXT_SETTINGS
