"""httpx-backed HEAD probe adapter for crate download targets."""

from __future__ import annotations

import logging
from typing import Final

import httpx

from header_audit.domain import ArtifactIdentifier, ObservedHeaders, ProbeFailure, ProbeOutcome, ProbeSuccess

from .interfaces import ArtifactProbePort

LOGGER = logging.getLogger(__name__)

PROBE_TIMEOUT_ERROR_CODE: Final[str] = "PROBE_TIMEOUT_ERROR"
PROBE_HTTP_STATUS_ERROR_CODE: Final[str] = "PROBE_HTTP_STATUS_ERROR"
PROBE_CONNECTION_ERROR_CODE: Final[str] = "PROBE_CONNECTION_ERROR"
PROBE_REQUEST_ERROR_CODE: Final[str] = "PROBE_REQUEST_ERROR"


class HttpHeadProbeAdapter(ArtifactProbePort):
    """Adapter issuing one `HEAD` request per artifact through a shared pooled client.

    The underlying `httpx.Client` is thread-safe and shared by every worker.
    """

    _USER_AGENT: Final[str] = "crate-header-audit/1.0 (Python/httpx)"

    def __init__(
        self,
        base_url: str = "https://static.crates.io/crates",
        file_extension: str = "crate",
        request_timeout_seconds: float = 5.0,
        user_agent: str | None = None,
        max_connections: int = 100,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize HEAD probe adapter.

        Args:
            base_url: Download base URL; artifacts live under `<base_url>/<name>/`.
            file_extension: Artifact file extension without leading dot.
            request_timeout_seconds: Per-request timeout in seconds.
            user_agent: Optional `User-Agent` header override.
            max_connections: Connection pool size, normally the probe concurrency.
            transport: Optional httpx transport override.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_base_url = base_url.strip().rstrip("/")
        normalized_file_extension = file_extension.strip().lstrip(".")

        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if not normalized_file_extension:
            raise ValueError("file_extension must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")
        if max_connections < 1:
            raise ValueError("max_connections must be >= 1")

        self._base_url = normalized_base_url
        self._file_extension = normalized_file_extension
        self._client = httpx.Client(
            headers={"User-Agent": (user_agent or self._USER_AGENT).strip()},
            timeout=request_timeout_seconds,
            follow_redirects=True,
            limits=httpx.Limits(max_connections=max_connections, max_keepalive_connections=max_connections),
            transport=transport,
        )

    def __enter__(self) -> "HttpHeadProbeAdapter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.adapter_close()

    def adapter_close(self) -> None:
        """Close the pooled HTTP client.

        Returns:
            None: Releases pooled connections as side effect.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        self._client.close()

    def adapter_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "http_head_probe"

    def adapter_build_target_url(self, identifier: ArtifactIdentifier) -> str:
        """Build `<base_url>/<name>/<name>-<version>.<ext>` for one artifact.

        Args:
            identifier: Artifact to locate.

        Returns:
            str: Absolute download URL.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return f"{self._base_url}/{identifier.name}/{identifier.name}-{identifier.version}.{self._file_extension}"

    def adapter_probe_headers(self, identifier: ArtifactIdentifier) -> ProbeOutcome:
        """Send one `HEAD` request and map the result to a probe outcome.

        Args:
            identifier: Artifact to probe.

        Returns:
            ProbeOutcome: `ProbeSuccess` for 2xx responses, otherwise `ProbeFailure`.

        Raises:
            RuntimeError: This implementation does not raise for network failures.
        """

        url = self.adapter_build_target_url(identifier)
        try:
            response = self._client.head(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            error_code, error_message = self._adapter_describe_error(error)
            LOGGER.info("probe.failed artifact=%s url=%s error_code=%s", identifier, url, error_code)
            return ProbeFailure(identifier=identifier, url=url, error_code=error_code, error_message=error_message)

        return ProbeSuccess(
            identifier=identifier,
            url=url,
            status_code=response.status_code,
            headers=ObservedHeaders.from_raw_pairs(list(response.headers.raw)),
        )

    def _adapter_describe_error(self, error: httpx.HTTPError | httpx.InvalidURL) -> tuple[str, str]:
        """Map one httpx failure to a deterministic error code and message.

        Args:
            error: Caught httpx exception.

        Returns:
            tuple[str, str]: Error code and human-readable message.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            return PROBE_HTTP_STATUS_ERROR_CODE, f"Request failed with HTTP {status_code}."
        if isinstance(error, httpx.TimeoutException):
            return PROBE_TIMEOUT_ERROR_CODE, f"Request timed out: {error}"
        if isinstance(error, httpx.TransportError):
            return PROBE_CONNECTION_ERROR_CODE, f"Request failed: {error}"
        return PROBE_REQUEST_ERROR_CODE, f"Request could not be sent: {error}"
