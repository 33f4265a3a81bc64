"""
Reference catalog access.

- ReferenceCatalog: read-only, partitioned catalog protocol
- InMemoryCatalog / JsonDirectoryCatalog: concrete catalogs
- ReferenceLibraryIndex: filtered, cached lookups over a catalog
"""
from .protocol import ReferenceCatalog, PartitionHandle, IndexEntry, project_fields
from .memory_catalog import InMemoryCatalog, JsonDirectoryCatalog
from .availability import parse_available_in
from .index import ReferenceLibraryIndex, QueryConstraints, IndexHit, GENERAL_SKILL

__all__ = [
    "ReferenceCatalog",
    "PartitionHandle",
    "IndexEntry",
    "project_fields",
    "InMemoryCatalog",
    "JsonDirectoryCatalog",
    "parse_available_in",
    "ReferenceLibraryIndex",
    "QueryConstraints",
    "IndexHit",
    "GENERAL_SKILL",
]
