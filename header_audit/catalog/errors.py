"""Project-native typed exceptions for catalog traversal failures."""

from __future__ import annotations

from pathlib import Path


class CatalogError(RuntimeError):
    """Base exception for fatal catalog failures.

    Attributes:
        path: Catalog path the failure relates to, when known.
    """

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class CatalogTraversalError(CatalogError):
    """Catalog root or one of its directories cannot be listed."""


class CatalogRecordError(CatalogError, ValueError):
    """One catalog file cannot be read or one of its records is malformed.

    Attributes:
        line_number: 1-based line number of the offending record, when known.
    """

    def __init__(self, message: str, path: Path | None = None, line_number: int | None = None):
        super().__init__(message=message, path=path)
        self.line_number = line_number
