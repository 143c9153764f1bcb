"""Job layer package for audit run orchestration boundaries."""

from .conformance import job_conformance_build_failure_finding, job_conformance_check_headers
from .interfaces import FindingSinkPort
from .reporting import FindingReporter
from .scheduler import DEFAULT_PROBE_CONCURRENCY, BoundedProbeScheduler

__all__ = [
	"BoundedProbeScheduler",
	"DEFAULT_PROBE_CONCURRENCY",
	"FindingReporter",
	"FindingSinkPort",
	"job_conformance_build_failure_finding",
	"job_conformance_check_headers",
]
