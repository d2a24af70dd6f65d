"""Domain layer - schema primitives.

This layer contains output-agnostic schema concepts:
- Dictionary and domain templates
- Columns, references, index memberships
- Tables and the keys/indexes/checks derived from their columns

SQL formatting belongs in adapters/ddl, not here.
"""

from yaml2ddl.domain.column import (
    INDEX_KEY_PATTERN,
    Column,
    IndexMembership,
    Reference,
)
from yaml2ddl.domain.dictionary import Dictionary
from yaml2ddl.domain.domain_registry import DomainRegistry, merge_attributes
from yaml2ddl.domain.table import Table

__all__ = [
    # Column
    "INDEX_KEY_PATTERN",
    "Column",
    "IndexMembership",
    "Reference",
    # Dictionary
    "Dictionary",
    # Domains
    "DomainRegistry",
    "merge_attributes",
    # Table
    "Table",
]
