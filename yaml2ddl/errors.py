"""Schema document exceptions."""

from __future__ import annotations


class SchemaDocumentError(Exception):
    """Base error for malformed or incomplete schema documents."""


class ShapeError(SchemaDocumentError):
    """A node has the wrong shape (e.g. a list where a mapping is required)."""

    def __init__(self, message: str, node: object = None) -> None:
        super().__init__(message)
        self.node = node


class MissingFieldError(SchemaDocumentError):
    """A required field is absent from a mapping."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} element doesn't exist.")
        self.field = field


class UnresolvedPlaceholderError(SchemaDocumentError):
    """A table-level check refers to a column path that no column declares."""

    def __init__(self, paths: list[str]) -> None:
        joined = ", ".join(f"<{p}>" for p in paths)
        super().__init__(f"Unresolved check placeholders: {joined}")
        self.paths = paths
