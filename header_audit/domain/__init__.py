"""Domain models used across application layer boundaries."""

from .header_spec import (
    CRATE_DOWNLOAD_EXACT_VALUES,
    CRATE_DOWNLOAD_REQUIRED_HEADERS,
    CRATE_DOWNLOAD_TOLERATED_HEADERS,
    DEFAULT_EXPECTED_HEADER_SPEC,
    ExpectedHeaderSpec,
    domain_build_expected_header_spec,
)
from .models import (
    FINDING_KIND_FETCH_FAILED,
    FINDING_KIND_MISSING_HEADER,
    FINDING_KIND_UNEXPECTED_HEADER,
    FINDING_KIND_UNEXPECTED_VALUE,
    ArtifactIdentifier,
    AuditRunResult,
    Finding,
    ObservedHeaders,
    ProbeFailure,
    ProbeOutcome,
    ProbeSuccess,
)

__all__ = [
    "ArtifactIdentifier",
    "AuditRunResult",
    "CRATE_DOWNLOAD_EXACT_VALUES",
    "CRATE_DOWNLOAD_REQUIRED_HEADERS",
    "CRATE_DOWNLOAD_TOLERATED_HEADERS",
    "DEFAULT_EXPECTED_HEADER_SPEC",
    "ExpectedHeaderSpec",
    "FINDING_KIND_FETCH_FAILED",
    "FINDING_KIND_MISSING_HEADER",
    "FINDING_KIND_UNEXPECTED_HEADER",
    "FINDING_KIND_UNEXPECTED_VALUE",
    "Finding",
    "ObservedHeaders",
    "ProbeFailure",
    "ProbeOutcome",
    "ProbeSuccess",
    "domain_build_expected_header_spec",
]
