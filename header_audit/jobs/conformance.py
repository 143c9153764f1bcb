"""Header conformance checks for one observed probe response."""

from __future__ import annotations

from header_audit.domain import (
    DEFAULT_EXPECTED_HEADER_SPEC,
    FINDING_KIND_FETCH_FAILED,
    FINDING_KIND_MISSING_HEADER,
    FINDING_KIND_UNEXPECTED_HEADER,
    FINDING_KIND_UNEXPECTED_VALUE,
    ArtifactIdentifier,
    ExpectedHeaderSpec,
    Finding,
    ObservedHeaders,
    ProbeFailure,
)


def job_conformance_check_headers(
    identifier: ArtifactIdentifier,
    headers: ObservedHeaders,
    header_spec: ExpectedHeaderSpec = DEFAULT_EXPECTED_HEADER_SPEC,
) -> list[Finding]:
    """Compare one observed header set against the expected header shape.

    Findings are ordered: missing required headers, then unexpected headers,
    then unexpected values, each group sorted by header name.

    Args:
        identifier: Artifact the response belongs to.
        headers: Observed response headers.
        header_spec: Expected header shape.

    Returns:
        list[Finding]: Ordered findings; empty when the response conforms.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    findings: list[Finding] = []

    for header_name in sorted(header_spec.required - headers.names):
        findings.append(
            Finding(
                identifier=identifier,
                kind=FINDING_KIND_MISSING_HEADER,
                message=f"Response did not contain '{header_name}' header.",
                header_name=header_name,
            )
        )

    for header_name in sorted(headers.names - header_spec.required - header_spec.tolerated):
        findings.append(
            Finding(
                identifier=identifier,
                kind=FINDING_KIND_UNEXPECTED_HEADER,
                message=f"Response contained unexpected '{header_name}' header.",
                header_name=header_name,
            )
        )

    for header_name in sorted(header_spec.exact_values):
        raw_value = headers.raw_values.get(header_name)
        if raw_value is None:
            continue
        expected_value = header_spec.exact_values[header_name]
        if _job_conformance_decode_value(raw_value) == expected_value:
            continue
        findings.append(
            Finding(
                identifier=identifier,
                kind=FINDING_KIND_UNEXPECTED_VALUE,
                message=f"Header '{header_name}' has unexpected value {_job_conformance_render_value(raw_value)}.",
                header_name=header_name,
            )
        )

    return findings


def job_conformance_build_failure_finding(failure: ProbeFailure) -> Finding:
    """Convert one failed probe into a reportable finding.

    Args:
        failure: Failed probe outcome.

    Returns:
        Finding: `fetch_failed` finding carrying the failure message.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return Finding(
        identifier=failure.identifier,
        kind=FINDING_KIND_FETCH_FAILED,
        message=failure.error_message,
    )


def _job_conformance_decode_value(raw_value: bytes) -> str | None:
    try:
        return raw_value.decode("ascii")
    except UnicodeDecodeError:
        return None


def _job_conformance_render_value(raw_value: bytes) -> str:
    # Quoted debug form: `nginx` renders as `'"nginx"'`, non-ASCII bytes as `\xNN`.
    escaped_value = raw_value.replace(b"\\", b"\\\\").replace(b'"', b'\\"')
    return f"'\"{escaped_value.decode('ascii', errors='backslashreplace')}\"'"
