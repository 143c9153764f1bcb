"""Adapter layer package for download host integration boundaries."""

from .http_probe import (
	PROBE_CONNECTION_ERROR_CODE,
	PROBE_HTTP_STATUS_ERROR_CODE,
	PROBE_REQUEST_ERROR_CODE,
	PROBE_TIMEOUT_ERROR_CODE,
	HttpHeadProbeAdapter,
)
from .interfaces import ArtifactProbePort

__all__ = [
	"ArtifactProbePort",
	"HttpHeadProbeAdapter",
	"PROBE_CONNECTION_ERROR_CODE",
	"PROBE_HTTP_STATUS_ERROR_CODE",
	"PROBE_REQUEST_ERROR_CODE",
	"PROBE_TIMEOUT_ERROR_CODE",
]
