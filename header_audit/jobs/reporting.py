"""Line-oriented finding reporter shared by all probe workers."""

from __future__ import annotations

import sys
import threading
from typing import Iterable, TextIO

from header_audit.domain import Finding


class FindingReporter:
    """Append-only finding sink serializing writes from concurrent workers.

    All findings of one artifact are written under a single lock acquisition,
    so they appear contiguously on the output stream.
    """

    def __init__(self, stream: TextIO | None = None):
        """Initialize finding reporter.

        Args:
            stream: Output stream; defaults to standard output.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._stream = stream
        self._lock = threading.Lock()
        self._finding_count = 0

    @property
    def finding_count(self) -> int:
        with self._lock:
            return self._finding_count

    def report_findings(self, findings: Iterable[Finding]) -> int:
        """Write findings as output lines, one line per finding.

        Args:
            findings: Findings of one artifact in emission order.

        Returns:
            int: Number of findings written.

        Raises:
            OSError: Raised when the output stream cannot be written.
        """

        batch = list(findings)
        if not batch:
            return 0

        with self._lock:
            stream = self._report_resolve_stream()
            for finding in batch:
                stream.write(finding.finding_render_line() + "\n")
            stream.flush()
            self._finding_count += len(batch)
        return len(batch)

    def report_summary(self, verified_count: int) -> None:
        """Write the final run summary line.

        Args:
            verified_count: Number of completed probes.

        Returns:
            None: Writes to the output stream as side effect.

        Raises:
            OSError: Raised when the output stream cannot be written.
        """

        with self._lock:
            stream = self._report_resolve_stream()
            stream.write(f"Verified {verified_count} versions.\n")
            stream.flush()

    def _report_resolve_stream(self) -> TextIO:
        # sys.stdout is looked up per write.
        return self._stream if self._stream is not None else sys.stdout
