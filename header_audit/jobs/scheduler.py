"""Bounded-concurrency probe scheduler driving one audit run."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Iterable

from header_audit.adapters import ArtifactProbePort
from header_audit.domain import (
    DEFAULT_EXPECTED_HEADER_SPEC,
    ArtifactIdentifier,
    AuditRunResult,
    ExpectedHeaderSpec,
    ProbeFailure,
)

from .conformance import job_conformance_build_failure_finding, job_conformance_check_headers
from .interfaces import FindingSinkPort

LOGGER = logging.getLogger(__name__)

DEFAULT_PROBE_CONCURRENCY = 100


class _RunCounters:
    """Lock-protected completion tallies for one run."""

    def __init__(self):
        self._lock = threading.Lock()
        self.completed_count = 0
        self.failed_count = 0
        self.finding_count = 0

    def counters_record_completion(self, failed: bool, finding_count: int) -> None:
        with self._lock:
            self.completed_count += 1
            self.finding_count += finding_count
            if failed:
                self.failed_count += 1


class BoundedProbeScheduler:
    """Probe every enumerated artifact with at most `concurrency` probes in flight.

    Each work unit probes one artifact, checks the outcome, reports its
    findings and records completion. Fetch failures are reported per artifact
    and never stop the run.
    """

    def __init__(
        self,
        probe_adapter: ArtifactProbePort,
        reporter: FindingSinkPort,
        header_spec: ExpectedHeaderSpec = DEFAULT_EXPECTED_HEADER_SPEC,
        concurrency: int = DEFAULT_PROBE_CONCURRENCY,
    ):
        """Initialize scheduler dependencies.

        Args:
            probe_adapter: Fetch capability returning probe outcomes.
            reporter: Shared finding sink.
            header_spec: Expected header shape applied to every response.
            concurrency: Maximum number of simultaneously in-flight probes.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if probe_adapter is None:
            raise ValueError("probe_adapter must not be None")
        if reporter is None:
            raise ValueError("reporter must not be None")
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")

        self._probe_adapter = probe_adapter
        self._reporter = reporter
        self._header_spec = header_spec
        self._concurrency = concurrency

    @property
    def concurrency(self) -> int:
        return self._concurrency

    def job_run(self, identifiers: Iterable[ArtifactIdentifier]) -> AuditRunResult:
        """Probe and check every identifier, then report the run summary.

        The identifier stream is consumed lazily; a new identifier is only
        pulled once an in-flight slot is free.

        Args:
            identifiers: Finite identifier stream, typically a lazy catalog enumeration.

        Returns:
            AuditRunResult: Completion and finding tallies.

        Raises:
            CatalogError: Raised when enumeration fails; no summary is reported.
            RuntimeError: Raised when completions do not match submissions.
        """

        LOGGER.info(
            "audit.run_started concurrency=%s probe_source=%s",
            self._concurrency,
            self._probe_adapter.adapter_source_name(),
        )

        counters = _RunCounters()
        submitted_count = self._job_drain_identifiers(identifiers=identifiers, counters=counters)

        if counters.completed_count != submitted_count:
            raise RuntimeError(
                f"completion count mismatch (submitted={submitted_count}, completed={counters.completed_count})"
            )

        self._reporter.report_summary(counters.completed_count)
        LOGGER.info(
            "audit.run_completed verified=%s findings=%s failures=%s",
            counters.completed_count,
            counters.finding_count,
            counters.failed_count,
        )
        return AuditRunResult(
            verified_count=counters.completed_count,
            finding_count=counters.finding_count,
            failure_count=counters.failed_count,
        )

    def _job_drain_identifiers(self, identifiers: Iterable[ArtifactIdentifier], counters: _RunCounters) -> int:
        """Submit identifiers while keeping at most `concurrency` work units in flight.

        Args:
            identifiers: Identifier stream.
            counters: Run tallies updated by work units.

        Returns:
            int: Number of submitted identifiers.

        Raises:
            CatalogError: Raised when enumeration fails.
            Exception: Re-raised from a work unit that failed unexpectedly.
        """

        identifier_iterator = iter(identifiers)
        in_flight: set[Future[None]] = set()
        submitted_count = 0
        exhausted = False

        with ThreadPoolExecutor(max_workers=self._concurrency, thread_name_prefix="probe") as executor:
            while True:
                while not exhausted and len(in_flight) < self._concurrency:
                    identifier = next(identifier_iterator, None)
                    if identifier is None:
                        exhausted = True
                        break
                    in_flight.add(executor.submit(self._job_process_identifier, identifier, counters))
                    submitted_count += 1

                if not in_flight:
                    break

                done, in_flight = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    future.result()

        return submitted_count

    def _job_process_identifier(self, identifier: ArtifactIdentifier, counters: _RunCounters) -> None:
        """Probe one artifact, check its outcome and report findings.

        Args:
            identifier: Artifact to process.
            counters: Run tallies to update on completion.

        Returns:
            None: Reports findings and updates counters as side effects.

        Raises:
            OSError: Raised when findings cannot be written.
        """

        outcome = self._probe_adapter.adapter_probe_headers(identifier)
        if isinstance(outcome, ProbeFailure):
            findings = [job_conformance_build_failure_finding(outcome)]
        else:
            findings = job_conformance_check_headers(
                identifier=identifier,
                headers=outcome.headers,
                header_spec=self._header_spec,
            )

        reported_count = self._reporter.report_findings(findings)
        counters.counters_record_completion(failed=isinstance(outcome, ProbeFailure), finding_count=reported_count)
