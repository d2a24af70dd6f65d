"""Ingestion layer - YAML loading and domain building."""

from yaml2ddl.ingestion.builder import SchemaBuilder
from yaml2ddl.ingestion.loader import YamlLoader, as_list, extract_element

__all__ = ["SchemaBuilder", "YamlLoader", "as_list", "extract_element"]
