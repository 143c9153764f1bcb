"""Typed domain models shared across runtime layers.

This module provides the immutable data contracts exchanged between the
catalog enumerator, the probe adapter, the conformance checker and the
finding reporter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Mapping

FINDING_KIND_MISSING_HEADER: Final[str] = "missing_header"
FINDING_KIND_UNEXPECTED_HEADER: Final[str] = "unexpected_header"
FINDING_KIND_UNEXPECTED_VALUE: Final[str] = "unexpected_value"
FINDING_KIND_FETCH_FAILED: Final[str] = "fetch_failed"


@dataclass(frozen=True)
class ArtifactIdentifier:
    """One catalog artifact identified by crate name and version.

    Attributes:
        name: Crate name as listed in the catalog.
        version: Crate version string as listed in the catalog.
    """

    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name} ({self.version})"


@dataclass(frozen=True)
class ObservedHeaders:
    """Header names and raw values observed on one probe response.

    Attributes:
        names: Lowercase header names present on the response.
        raw_values: Raw bytes of the first value of each header, keyed by lowercase name.
    """

    names: frozenset[str]
    raw_values: Mapping[str, bytes] = field(default_factory=dict)

    @classmethod
    def from_raw_pairs(cls, raw_pairs: list[tuple[bytes, bytes]]) -> "ObservedHeaders":
        """Build observed headers from raw `(name, value)` byte pairs.

        Args:
            raw_pairs: Header pairs in wire order.

        Returns:
            ObservedHeaders: Normalized header set keeping the first value per name.

        Raises:
            UnicodeDecodeError: Raised when a header name is not ASCII.
        """

        raw_values: dict[str, bytes] = {}
        for raw_name, raw_value in raw_pairs:
            normalized_name = raw_name.decode("ascii").strip().lower()
            raw_values.setdefault(normalized_name, bytes(raw_value))
        return cls(names=frozenset(raw_values), raw_values=MappingProxyType(raw_values))

    @classmethod
    def from_text_headers(cls, headers: Mapping[str, str]) -> "ObservedHeaders":
        """Build observed headers from a plain text mapping.

        Args:
            headers: Header names mapped to text values.

        Returns:
            ObservedHeaders: Normalized header set.

        Raises:
            UnicodeEncodeError: Raised when a name or value cannot be encoded as latin-1.
        """

        return cls.from_raw_pairs(
            [(name.encode("latin-1"), value.encode("latin-1")) for name, value in headers.items()]
        )


@dataclass(frozen=True)
class Finding:
    """One reported anomaly tied to the artifact that produced it.

    Attributes:
        identifier: Artifact the finding belongs to.
        kind: Finding category (`missing_header`, `unexpected_header`, `unexpected_value`, `fetch_failed`).
        message: Human-readable anomaly description.
        header_name: Lowercase header name involved, when the finding concerns one header.
    """

    identifier: ArtifactIdentifier
    kind: str
    message: str
    header_name: str | None = None

    def finding_render_line(self) -> str:
        """Render the finding as one output line.

        Returns:
            str: Line formatted as `<name> (<version>): <message>`.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return f"{self.identifier}: {self.message}"


@dataclass(frozen=True)
class ProbeSuccess:
    """Probe outcome for a response received with a successful status.

    Attributes:
        identifier: Probed artifact.
        url: Requested target URL.
        status_code: Final HTTP status code.
        headers: Observed response headers.
    """

    identifier: ArtifactIdentifier
    url: str
    status_code: int
    headers: ObservedHeaders


@dataclass(frozen=True)
class ProbeFailure:
    """Probe outcome for a request that did not yield a usable response.

    Attributes:
        identifier: Probed artifact.
        url: Requested target URL.
        error_code: Deterministic failure code.
        error_message: Human-readable failure description.
    """

    identifier: ArtifactIdentifier
    url: str
    error_code: str
    error_message: str


ProbeOutcome = ProbeSuccess | ProbeFailure


@dataclass(frozen=True)
class AuditRunResult:
    """Summary contract for one completed audit run.

    Attributes:
        verified_count: Number of completed probes, successful or not.
        finding_count: Number of reported findings, fetch failures included.
        failure_count: Number of probes that ended in a failure outcome.
    """

    verified_count: int
    finding_count: int
    failure_count: int
