"""Application bootstrap wiring for startup validation and dependency assembly."""

from __future__ import annotations

from typing import TextIO

from header_audit.adapters import HttpHeadProbeAdapter
from header_audit.config import AuditSettings
from header_audit.domain import DEFAULT_EXPECTED_HEADER_SPEC
from header_audit.jobs import BoundedProbeScheduler, FindingReporter


def bootstrap_create_probe_adapter(settings: AuditSettings) -> HttpHeadProbeAdapter:
    """Build the shared HEAD probe adapter from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        HttpHeadProbeAdapter: Adapter owning the pooled HTTP client; callers close it.

    Raises:
        ValueError: Raised when adapter configuration is invalid.
    """

    return HttpHeadProbeAdapter(
        base_url=settings.audit_base_url,
        file_extension=settings.audit_file_extension,
        request_timeout_seconds=settings.audit_request_timeout_seconds,
        user_agent=settings.audit_user_agent,
        max_connections=settings.audit_concurrency,
    )


def bootstrap_create_audit_scheduler(
    settings: AuditSettings,
    probe_adapter: HttpHeadProbeAdapter,
    output_stream: TextIO | None = None,
) -> BoundedProbeScheduler:
    """Assemble the probe scheduler around one adapter and one stdout reporter.

    Args:
        settings: Validated runtime settings.
        probe_adapter: Shared probe adapter.
        output_stream: Optional findings stream; defaults to standard output.

    Returns:
        BoundedProbeScheduler: Fully wired scheduler.

    Raises:
        ValueError: Raised when scheduler configuration is invalid.
    """

    return BoundedProbeScheduler(
        probe_adapter=probe_adapter,
        reporter=FindingReporter(stream=output_stream),
        header_spec=DEFAULT_EXPECTED_HEADER_SPEC,
        concurrency=settings.audit_concurrency,
    )
