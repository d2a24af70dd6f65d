"""
yaml2ddl: Declarative YAML schema documents to SQL DDL.

Architecture:
    YAML → Ingestion (SchemaBuilder) → Domain (Table/Column) → Adapter → SQL text

Layers:
    - domain/: Pure schema types (dictionary, domains, columns, tables)
    - ingestion/: YAML loading and domain object construction
    - adapters/: Output-specific rendering (DDL)

Key Concepts:
    - Domains are attribute templates merged underneath a column's own attributes
    - Physical names come from the dictionary, one dot-separated segment at a time
    - Domain knows what it IS, adapters know how to RENDER it
"""

__version__ = "0.1.0"
