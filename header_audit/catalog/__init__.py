"""Catalog layer package for artifact enumeration boundaries."""

from .enumerator import (
    SKIPPED_CATALOG_ENTRY_NAMES,
    CatalogRecord,
    catalog_iter_artifact_identifiers,
    catalog_iter_file_identifiers,
    catalog_parse_record_line,
)
from .errors import CatalogError, CatalogRecordError, CatalogTraversalError

__all__ = [
    "CatalogError",
    "CatalogRecord",
    "CatalogRecordError",
    "CatalogTraversalError",
    "SKIPPED_CATALOG_ENTRY_NAMES",
    "catalog_iter_artifact_identifiers",
    "catalog_iter_file_identifiers",
    "catalog_parse_record_line",
]
