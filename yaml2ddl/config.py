"""Configuration schema for yaml2ddl.

Defines the y2d.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator
from typing_extensions import Self

# Environment variable for default output encoding
DEFAULT_ENCODING_ENV = "Y2D_ENCODING"


def get_default_encoding() -> str:
    """Get default output encoding from environment or fall back to UTF-8."""
    value = os.environ.get(DEFAULT_ENCODING_ENV, "utf-8")
    try:
        return codecs.lookup(value).name
    except LookupError:
        return "utf-8"


class Y2DConfig(BaseModel):
    """
    Root configuration for yaml2ddl.

    This is the schema for y2d.yml files. Document paths are relative to
    the directory holding the config file.

    Example:
        table: tables/customer.yaml
        dictionary: dict.yaml
        domains: domains.yaml
        encoding: cp932
        strict_checks: true
    """

    table: str = "table.yaml"
    dictionary: str | None = "dict.yaml"
    domains: str | None = "domains.yaml"
    encoding: str = Field(default_factory=get_default_encoding)
    strict_checks: bool = False

    model_config = {"frozen": True, "extra": "forbid"}

    _base_dir: Path | None = PrivateAttr(default=None)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding '{v}'")
        return v

    @model_validator(mode="after")
    def validate_table_path(self) -> Self:
        if not self.table.strip():
            raise ValueError("table path must not be empty")
        return self

    @property
    def base_dir(self) -> Path:
        """Directory document paths are resolved against."""
        return self._base_dir or Path.cwd()

    def resolve(self, path: str | None) -> Path | None:
        """Resolve a configured document path against ``base_dir``."""
        if path is None:
            return None
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.base_dir / candidate

    @property
    def table_path(self) -> Path:
        resolved = self.resolve(self.table)
        assert resolved is not None
        return resolved

    @property
    def dictionary_path(self) -> Path | None:
        return self.resolve(self.dictionary)

    @property
    def domains_path(self) -> Path | None:
        return self.resolve(self.domains)

    @classmethod
    def from_yaml(cls, content: str, base_dir: Path | None = None) -> Y2DConfig:
        """Parse config from YAML string."""
        data: Any = yaml.safe_load(content)
        config = cls.model_validate(data or {})
        config._base_dir = base_dir
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> Y2DConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls.from_yaml(content, base_dir=path.resolve().parent)


# Config file discovery
CONFIG_FILENAMES = ["y2d.yml", "y2d.yaml", ".y2d.yml", ".y2d.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find y2d.yml config file.

    Searches in:
    1. start_dir (if provided)
    2. Current working directory
    3. Parent directories up to root

    Args:
        start_dir: Directory to start search from

    Returns:
        Path to config file, or None if not found
    """
    if start_dir is None:
        start_dir = Path.cwd()
    else:
        start_dir = Path(start_dir)

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path | str | None = None) -> Y2DConfig:
    """
    Load configuration from file.

    If path is not provided, searches for y2d.yml in current and parent
    directories, falling back to defaults when none exists.

    Args:
        path: Explicit path to config file

    Returns:
        Parsed Y2DConfig

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If config is invalid
    """
    if path is None:
        found = find_config()
        if found is None:
            return Y2DConfig()
        path = found
    else:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

    return Y2DConfig.from_file(path)
