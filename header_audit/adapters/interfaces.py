"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from header_audit.domain import ArtifactIdentifier, ProbeOutcome


class ArtifactProbePort(Protocol):
    """Port definition for header-only probes of artifact download targets."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics.

        Returns:
            str: Human-readable upstream source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def adapter_build_target_url(self, identifier: ArtifactIdentifier) -> str:
        """Return the download target URL for one artifact.

        Args:
            identifier: Artifact to locate.

        Returns:
            str: Absolute download URL.

        Raises:
            RuntimeError: Raised when the URL cannot be built.
        """

    def adapter_probe_headers(self, identifier: ArtifactIdentifier) -> ProbeOutcome:
        """Probe one artifact and return its outcome.

        Expected network failures are returned as `ProbeFailure` values.

        Args:
            identifier: Artifact to probe.

        Returns:
            ProbeOutcome: Success with observed headers, or failure description.

        Raises:
            RuntimeError: Raised only for unexpected programming errors.
        """
