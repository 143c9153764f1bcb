"""Lazy artifact enumeration over a crates.io-style index checkout."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, Iterator

from pydantic import BaseModel, ConfigDict, ValidationError

from header_audit.domain import ArtifactIdentifier

from .errors import CatalogRecordError, CatalogTraversalError

LOGGER = logging.getLogger(__name__)

SKIPPED_CATALOG_ENTRY_NAMES: Final[frozenset[str]] = frozenset({".git", "config.json"})


class CatalogRecord(BaseModel):
    """One newline-delimited catalog record.

    Only `name` and `vers` are read; any other record fields are ignored.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str
    vers: str


def catalog_iter_artifact_identifiers(catalog_root: Path | str) -> Iterator[ArtifactIdentifier]:
    """Yield artifact identifiers for every record under the catalog root.

    Directories and files are visited in sorted order. Entries named `.git`
    or `config.json` are skipped at any depth. Duplicate records are yielded
    as many times as they appear.

    Args:
        catalog_root: Catalog root directory.

    Returns:
        Iterator[ArtifactIdentifier]: Lazy identifier stream.

    Raises:
        CatalogTraversalError: Raised when the root or a directory cannot be listed.
        CatalogRecordError: Raised when a file cannot be read or a record is malformed.
    """

    root_path = Path(catalog_root)
    if not root_path.is_dir():
        raise CatalogTraversalError(f"Catalog root is not a readable directory: {root_path}", path=root_path)
    if root_path.name in SKIPPED_CATALOG_ENTRY_NAMES:
        LOGGER.warning("catalog.root_skipped root=%s", root_path)
        return

    for directory_path, directory_names, file_names in os.walk(root_path, onerror=_catalog_raise_walk_error):
        directory_names[:] = sorted(name for name in directory_names if name not in SKIPPED_CATALOG_ENTRY_NAMES)
        for file_name in sorted(file_names):
            if file_name in SKIPPED_CATALOG_ENTRY_NAMES:
                continue
            file_path = Path(directory_path) / file_name
            if file_path.is_symlink() or not file_path.is_file():
                continue
            yield from catalog_iter_file_identifiers(file_path)


def catalog_iter_file_identifiers(file_path: Path) -> Iterator[ArtifactIdentifier]:
    """Yield artifact identifiers from one newline-delimited catalog file.

    Args:
        file_path: Catalog data file.

    Returns:
        Iterator[ArtifactIdentifier]: Lazy identifier stream for the file.

    Raises:
        CatalogRecordError: Raised when the file cannot be read or a record is malformed.
    """

    try:
        with file_path.open("r", encoding="utf-8") as catalog_file:
            for line_number, line in enumerate(catalog_file, start=1):
                if not line.strip():
                    continue
                yield catalog_parse_record_line(line=line, file_path=file_path, line_number=line_number)
    except (OSError, UnicodeDecodeError) as error:
        raise CatalogRecordError(f"Catalog file could not be read: {file_path}", path=file_path) from error


def catalog_parse_record_line(line: str, file_path: Path | None = None, line_number: int | None = None) -> ArtifactIdentifier:
    """Parse one catalog record line into an artifact identifier.

    Args:
        line: Raw JSON record text.
        file_path: Source file, used in error messages.
        line_number: 1-based source line number, used in error messages.

    Returns:
        ArtifactIdentifier: Identifier built from the record `name` and `vers` fields.

    Raises:
        CatalogRecordError: Raised when the line is not a JSON object with string `name` and `vers`.
    """

    try:
        record = CatalogRecord.model_validate_json(line)
    except ValidationError as error:
        location = f"{file_path}:{line_number}" if file_path is not None else f"line {line_number}"
        raise CatalogRecordError(
            f"Malformed catalog record at {location}: {error.errors()[0]['msg']}",
            path=file_path,
            line_number=line_number,
        ) from error
    return ArtifactIdentifier(name=record.name, version=record.vers)


def _catalog_raise_walk_error(error: OSError) -> None:
    failed_path = Path(error.filename) if error.filename else None
    raise CatalogTraversalError(f"Catalog directory could not be listed: {failed_path}", path=failed_path) from error
