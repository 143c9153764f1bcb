"""Regression tests for header conformance classification."""

from __future__ import annotations

from header_audit.domain import (
    CRATE_DOWNLOAD_EXACT_VALUES,
    CRATE_DOWNLOAD_REQUIRED_HEADERS,
    FINDING_KIND_FETCH_FAILED,
    FINDING_KIND_MISSING_HEADER,
    FINDING_KIND_UNEXPECTED_HEADER,
    FINDING_KIND_UNEXPECTED_VALUE,
    ArtifactIdentifier,
    ObservedHeaders,
    ProbeFailure,
    domain_build_expected_header_spec,
)
from header_audit.jobs import job_conformance_build_failure_finding, job_conformance_check_headers

_IDENTIFIER = ArtifactIdentifier(name="serde", version="1.0.0")


def _build_conforming_headers() -> dict[str, str]:
    """Build a header mapping matching the default crate download shape.

    Returns:
        dict[str, str]: Conforming header names and values.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    headers = {header_name: "value" for header_name in CRATE_DOWNLOAD_REQUIRED_HEADERS}
    headers.update(CRATE_DOWNLOAD_EXACT_VALUES)
    return headers


def test_jobs_conformance_exact_match_produces_no_findings() -> None:
    """Return no findings when the response matches the expected shape exactly.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when a conforming response is flagged.
    """

    headers = ObservedHeaders.from_text_headers(_build_conforming_headers())

    assert job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers) == []


def test_jobs_conformance_reports_single_missing_required_header() -> None:
    """Report exactly one missing-header finding for an absent required header.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when missing headers are not reported exactly once.
    """

    header_spec = domain_build_expected_header_spec(required=("content-type", "server"))
    headers = ObservedHeaders.from_text_headers({"content-type": "application/x-tar"})

    findings = job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers, header_spec=header_spec)

    assert len(findings) == 1
    assert findings[0].kind == FINDING_KIND_MISSING_HEADER
    assert findings[0].header_name == "server"
    assert findings[0].identifier == _IDENTIFIER
    assert findings[0].finding_render_line() == "serde (1.0.0): Response did not contain 'server' header."


def test_jobs_conformance_tolerates_age_header() -> None:
    """Do not report the allow-listed `age` header as unexpected.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when the tolerated header is flagged.
    """

    raw_headers = _build_conforming_headers()
    raw_headers["Age"] = "3600"

    findings = job_conformance_check_headers(
        identifier=_IDENTIFIER,
        headers=ObservedHeaders.from_text_headers(raw_headers),
    )

    assert findings == []


def test_jobs_conformance_reports_unexpected_header_once() -> None:
    """Report one unexpected-header finding for a header neither required nor tolerated.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when the extra header is not reported exactly once.
    """

    raw_headers = _build_conforming_headers()
    raw_headers["X-Foo"] = "bar"

    findings = job_conformance_check_headers(
        identifier=_IDENTIFIER,
        headers=ObservedHeaders.from_text_headers(raw_headers),
    )

    assert [(finding.kind, finding.header_name) for finding in findings] == [
        (FINDING_KIND_UNEXPECTED_HEADER, "x-foo")
    ]
    assert findings[0].message == "Response contained unexpected 'x-foo' header."


def test_jobs_conformance_value_comparison_is_case_sensitive() -> None:
    """Report a value mismatch when only the letter case differs.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when case-different values are accepted.
    """

    raw_headers = _build_conforming_headers()
    raw_headers["server"] = "amazons3"

    findings = job_conformance_check_headers(
        identifier=_IDENTIFIER,
        headers=ObservedHeaders.from_text_headers(raw_headers),
    )

    assert len(findings) == 1
    assert findings[0].kind == FINDING_KIND_UNEXPECTED_VALUE
    assert findings[0].header_name == "server"
    assert findings[0].message == "Header 'server' has unexpected value '\"amazons3\"'."


def test_jobs_conformance_undecodable_value_is_mismatch() -> None:
    """Treat a header value that is not ASCII text as a value mismatch.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when undecodable values are accepted.
    """

    header_spec = domain_build_expected_header_spec(required=("server",), exact_values={"server": "AmazonS3"})
    headers = ObservedHeaders.from_raw_pairs([(b"Server", b"Amazon\xffS3")])

    findings = job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers, header_spec=header_spec)

    assert len(findings) == 1
    assert findings[0].kind == FINDING_KIND_UNEXPECTED_VALUE
    assert findings[0].message == "Header 'server' has unexpected value '\"Amazon\\xffS3\"'."


def test_jobs_conformance_header_names_are_case_insensitive() -> None:
    """Match header names regardless of letter case on either side.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when name case produces findings.
    """

    header_spec = domain_build_expected_header_spec(
        required=("Content-Type", "SERVER"),
        exact_values={"Server": "AmazonS3"},
    )
    headers = ObservedHeaders.from_text_headers({"CONTENT-TYPE": "application/x-tar", "server": "AmazonS3"})

    assert job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers, header_spec=header_spec) == []


def test_jobs_conformance_absent_exact_value_header_is_not_flagged() -> None:
    """Skip the value check for a header that is absent and not required.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when an absent optional header is flagged.
    """

    header_spec = domain_build_expected_header_spec(required=("date",), exact_values={"server": "AmazonS3"})
    headers = ObservedHeaders.from_text_headers({"date": "Mon, 01 Jan 2024 00:00:00 GMT"})

    assert job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers, header_spec=header_spec) == []


def test_jobs_conformance_findings_are_ordered_and_idempotent() -> None:
    """Emit missing, unexpected, then value findings in a stable order on every call.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when ordering or repeatability is broken.
    """

    raw_headers = _build_conforming_headers()
    del raw_headers["etag"]
    del raw_headers["date"]
    raw_headers["x-b"] = "1"
    raw_headers["x-a"] = "1"
    raw_headers["server"] = "nginx"
    headers = ObservedHeaders.from_text_headers(raw_headers)

    first_findings = job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers)
    second_findings = job_conformance_check_headers(identifier=_IDENTIFIER, headers=headers)

    assert first_findings == second_findings
    assert [(finding.kind, finding.header_name) for finding in first_findings] == [
        (FINDING_KIND_MISSING_HEADER, "date"),
        (FINDING_KIND_MISSING_HEADER, "etag"),
        (FINDING_KIND_UNEXPECTED_HEADER, "x-a"),
        (FINDING_KIND_UNEXPECTED_HEADER, "x-b"),
        (FINDING_KIND_UNEXPECTED_VALUE, "server"),
    ]


def test_jobs_conformance_missing_exact_value_header_reports_presence_only() -> None:
    """Report a required exact-value header that is absent only as missing.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when an absent header also yields a value finding.
    """

    raw_headers = _build_conforming_headers()
    del raw_headers["server"]

    findings = job_conformance_check_headers(
        identifier=_IDENTIFIER,
        headers=ObservedHeaders.from_text_headers(raw_headers),
    )

    assert [(finding.kind, finding.header_name) for finding in findings] == [(FINDING_KIND_MISSING_HEADER, "server")]


def test_jobs_conformance_failure_finding_carries_failure_message() -> None:
    """Convert a failed probe into one fetch-failed finding for the same artifact.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when failure conversion loses information.
    """

    failure = ProbeFailure(
        identifier=_IDENTIFIER,
        url="https://static.crates.io/crates/serde/serde-1.0.0.crate",
        error_code="PROBE_HTTP_STATUS_ERROR",
        error_message="Request failed with HTTP 404.",
    )

    finding = job_conformance_build_failure_finding(failure)

    assert finding.kind == FINDING_KIND_FETCH_FAILED
    assert finding.header_name is None
    assert finding.finding_render_line() == "serde (1.0.0): Request failed with HTTP 404."
