"""SchemaBuilder - transforms schema YAML into domain objects."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from yaml2ddl.domain import (
    INDEX_KEY_PATTERN,
    Column,
    Dictionary,
    DomainRegistry,
    IndexMembership,
    Reference,
    Table,
    merge_attributes,
)
from yaml2ddl.errors import ShapeError
from yaml2ddl.ingestion.loader import STDIN_PATH, YamlLoader, as_list, extract_element

logger = logging.getLogger(__name__)


def _present(value: Any) -> Any:
    """Treat null and `false` as an absent attribute."""
    return None if value is None or value is False else value


def _text(value: Any) -> str | None:
    """Render a scalar document value as text (booleans in lower case)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _size(value: Any) -> int | str | None:
    value = _present(value)
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    return _text(value)


def _require_mapping(node: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(node, Mapping):
        raise ShapeError(f"{what} must be a mapping, got {type(node).__name__}", node)
    return node


class SchemaBuilder:
    """
    Build tables from schema YAML.

    A builder carries the optional dictionary and domain registry that every
    column of a table is built against. Both are read-only.
    """

    def __init__(
        self,
        dictionary: Dictionary | None = None,
        domains: DomainRegistry | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.domains = domains

    @classmethod
    def from_files(
        cls,
        table_path: str | Path,
        dictionary_path: str | Path | None = None,
        domains_path: str | Path | None = None,
        loader: YamlLoader | None = None,
    ) -> Table:
        """
        Load the dictionary, domain and table documents and build the table.

        ``table_path`` may be ``-`` to read the table document from stdin.
        """
        loader = loader or YamlLoader()

        dictionary = None
        if dictionary_path is not None:
            dictionary = cls.build_dictionary(loader.load_file(dictionary_path))

        domains = None
        if domains_path is not None:
            domains = cls.build_domains(loader.load_file(domains_path))

        builder = cls(dictionary, domains)
        filename = None if str(table_path) == STDIN_PATH else str(table_path)
        return builder.build_table(loader.load_file(table_path), filename)

    @classmethod
    def from_dict(
        cls,
        table: Any,
        dictionary: Any = None,
        domains: Any = None,
        filename: str | None = None,
    ) -> Table:
        """Build a table from already-parsed documents (for testing)."""
        builder = cls(
            cls.build_dictionary(dictionary) if dictionary is not None else None,
            cls.build_domains(domains) if domains is not None else None,
        )
        return builder.build_table(table, filename)

    @staticmethod
    def build_dictionary(tree: Any) -> Dictionary:
        """Build a Dictionary from a document with a ``dictionary`` root key."""
        root = _require_mapping(extract_element(tree, "dictionary"), "dictionary")
        entries = {str(k): str(v) for k, v in root.items() if v is not None}
        logger.debug("Loaded dictionary with %d entries", len(entries))
        return Dictionary(entries=entries)

    @staticmethod
    def build_domains(tree: Any) -> DomainRegistry:
        """Build a DomainRegistry from a document with a ``domains`` root key."""
        root = _require_mapping(extract_element(tree, "domains"), "domains")
        domains: dict[str, dict[str, Any]] = {}
        for name, template in root.items():
            template = _require_mapping(template, f"domain '{name}'")
            domains[str(name)] = {str(k): v for k, v in template.items()}
        logger.debug("Loaded %d domains", len(domains))
        return DomainRegistry(domains=domains)

    def build_table(self, tree: Any, filename: str | None = None) -> Table:
        """Build a Table from a document with a ``table`` root key."""
        root = extract_element(tree, "table")
        raw_columns = extract_element(root, "columns")
        if not isinstance(raw_columns, list):
            raise ShapeError("columns must be a sequence of mappings", raw_columns)

        columns = tuple(self.build_column(c) for c in raw_columns)

        pname = _text(root.get("pname"))
        if pname is None and filename:
            pname = Path(filename).stem

        refers = root.get("refers")
        table_refers = None
        if refers is not None:
            table_refers = tuple(self._translate(_text(e) or "") for e in as_list(refers))

        table = Table(
            logical_name=_text(root.get("name")),
            physical_name=pname,
            comment=_text(root.get("comment")) or "",
            columns=columns,
            check_expressions=tuple(_text(e) or "" for e in as_list(root.get("checks"))),
            refers=table_refers,
            source_file=filename,
        )
        logger.debug("Built %s", table.summary())
        return table

    def build_column(self, raw: Any) -> Column:
        """
        Build a Column from its raw attribute mapping.

        Domain attributes are merged underneath the raw attributes first,
        so anything the column states explicitly wins.
        """
        raw = _require_mapping(raw, "column")
        logical_name = _text(raw.get("name"))
        attrs = self._merge_domain(raw, logical_name)

        pname = _text(attrs.get("pname"))
        if pname is None:
            pname = self._make_pname(logical_name)

        # Only null and false make a column NOT NULL; 0 and "" stay nullable
        nullable = True
        if "nullable" in attrs:
            nullable = _present(attrs["nullable"]) is not None

        return Column(
            logical_name=logical_name,
            physical_name=pname,
            domain=_text(attrs.get("domain")),
            type=_text(attrs.get("type")),
            size=_size(attrs.get("size")),
            default=_present(attrs.get("default")),
            nullable=nullable,
            comment=_text(_present(attrs.get("comment"))) or "",
            primary_key_rank=_present(attrs.get("pkey")),
            index_memberships=self._build_index_memberships(attrs),
            check_expressions=tuple(_text(e) or "" for e in as_list(attrs.get("check"))),
            references=tuple(
                self.build_reference(r, pname) for r in as_list(attrs.get("refers"))
            ),
        )

    @staticmethod
    def build_reference(raw: Any, column_name: str | None) -> Reference:
        """Build a Reference owned by the column with physical name ``column_name``."""
        raw = _require_mapping(raw, "reference")
        order = raw.get("order")
        return Reference(
            table_index=raw.get("table"),
            order=0 if order is None else order,
            column=column_name,
            remote_column=_text(raw.get("column")) or column_name,
        )

    def _merge_domain(
        self, raw: Mapping[str, Any], logical_name: str | None
    ) -> dict[str, Any]:
        """Merge the column's domain template under its raw attributes."""
        if self.domains is None:
            return dict(raw)

        domain_name = _text(raw.get("domain"))
        template = self.domains.resolve(domain_name)
        if template is not None:
            logger.debug("Column %s uses domain %s", logical_name, domain_name)
            return merge_attributes(template, raw)

        # No explicit type: the column's own name may double as a domain name
        if raw.get("type") is None and logical_name:
            implicit = logical_name.replace(".", "")
            template = self.domains.resolve(implicit)
            if template is not None:
                logger.debug("Column %s takes domain %s by name", logical_name, implicit)
                return merge_attributes(template, raw)

        return dict(raw)

    def _make_pname(self, logical_name: str | None) -> str | None:
        if logical_name is None or self.dictionary is None:
            return logical_name
        return self.dictionary.translate(logical_name)

    def _translate(self, logical_name: str) -> str:
        if self.dictionary is None:
            return logical_name
        return self.dictionary.translate(logical_name)

    @staticmethod
    def _build_index_memberships(attrs: Mapping[str, Any]) -> tuple[IndexMembership, ...]:
        return tuple(
            IndexMembership(key=key, rank=rank)
            for key, rank in attrs.items()
            if isinstance(key, str)
            and INDEX_KEY_PATTERN.match(key)
            and _present(rank) is not None
        )
