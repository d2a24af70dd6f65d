"""YAML loader and document accessor for schema documents."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import IO, Any

import yaml

from yaml2ddl.errors import MissingFieldError, ShapeError

logger = logging.getLogger(__name__)

# Path value that means "read the document from standard input"
STDIN_PATH = "-"


def extract_element(tree: Any, element: str, required: bool = True) -> Any:
    """
    Get a field from a mapping-shaped document node.

    Null values count as absent, so `table: ~` behaves like a missing key.

    Raises:
        ShapeError: If the node is a sequence (or any other non-mapping)
        MissingFieldError: If ``required`` and the field is absent
    """
    if not isinstance(tree, Mapping):
        if isinstance(tree, Sequence) and not isinstance(tree, str):
            raise ShapeError("This root element is not a mapping.", tree)
        raise ShapeError(
            f"Expected a mapping to read '{element}' from, got {type(tree).__name__}",
            tree,
        )

    value = tree.get(element)
    if value is None:
        if required:
            raise MissingFieldError(element)
        return None
    return value


def as_list(value: Any) -> list[Any]:
    """Normalize a scalar-or-list field into a list (None gives [])."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class YamlLoader:
    """
    Load schema documents (table, dictionary, domains) from YAML.

    Each document is a single file whose root is a mapping with one
    top-level key naming its kind:

        table:       {name: ..., pname: ..., columns: [...]}
        dictionary:  {word1: AAA, word2: BBB}
        domains:     {domain1: {type: number, size: 10}}

    The root shape is not checked here; ``extract_element`` reports it
    when the kind key is read.
    """

    def __init__(self, stdin: IO[str] | None = None) -> None:
        self.stdin = stdin

    def load_file(self, file_path: str | Path) -> Any:
        """Load a single YAML file, or standard input when given ``-``."""
        if str(file_path) == STDIN_PATH:
            return self.load_stream(self.stdin or sys.stdin)

        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        logger.debug("Loading %s", path)
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)

        return {} if content is None else content

    def load_stream(self, stream: IO[str]) -> Any:
        """Load a YAML document from an open text stream."""
        logger.debug("Loading document from stream")
        content = yaml.safe_load(stream)
        return {} if content is None else content

    @staticmethod
    def load_string(content: str) -> Any:
        """Parse a YAML document held in a string (for testing)."""
        data = yaml.safe_load(content)
        return {} if data is None else data
