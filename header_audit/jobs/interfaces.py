"""Typed interfaces for job-layer orchestration responsibilities."""

from typing import Iterable, Protocol

from header_audit.domain import Finding


class FindingSinkPort(Protocol):
    """Port definition for the shared append-only finding output."""

    def report_findings(self, findings: Iterable[Finding]) -> int:
        """Record findings of one artifact.

        Args:
            findings: Findings in emission order.

        Returns:
            int: Number of findings recorded.

        Raises:
            OSError: Raised when the sink cannot be written.
        """

    def report_summary(self, verified_count: int) -> None:
        """Record the final run summary.

        Args:
            verified_count: Number of completed probes.

        Returns:
            None: Records the summary as side effect.

        Raises:
            OSError: Raised when the sink cannot be written.
        """
