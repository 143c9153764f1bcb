"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AuditSettings(BaseSettings):
    """Runtime settings for probe targets, concurrency and logging.

    Environment variable names map directly to field names in uppercase.
    Example: `audit_concurrency` reads from `AUDIT_CONCURRENCY`.

    Attributes:
        audit_base_url: Download base URL; artifacts live under `<base_url>/<name>/`.
        audit_file_extension: Artifact file extension appended to `<name>-<version>`.
        audit_concurrency: Maximum number of simultaneously in-flight probes.
        audit_request_timeout_seconds: Per-request HTTP timeout.
        audit_user_agent: `User-Agent` header sent with every probe.
        audit_log_level: Standard library logging level name for stderr diagnostics.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    audit_base_url: str = Field(default="https://static.crates.io/crates", min_length=1)
    audit_file_extension: str = Field(default="crate", min_length=1)
    audit_concurrency: int = Field(default=100, ge=1)
    audit_request_timeout_seconds: float = Field(default=5.0, gt=0)
    audit_user_agent: str = Field(default="crate-header-audit/1.0 (Python/httpx)", min_length=1)
    audit_log_level: str = Field(default="WARNING")

    @field_validator("audit_base_url", "audit_user_agent")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("audit_file_extension")
    @classmethod
    def _validate_file_extension(cls, value: str) -> str:
        normalized_value = value.strip().lstrip(".")
        if not normalized_value:
            raise ValueError("audit_file_extension must not be blank")
        return normalized_value

    @field_validator("audit_log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"audit_log_level must be a logging level name, got {value!r}")
        return normalized_value


def config_load_settings() -> AuditSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AuditSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AuditSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_apply_overrides(settings: AuditSettings, **overrides: object) -> AuditSettings:
    """Return settings with non-None command-line overrides applied and revalidated.

    Args:
        settings: Loaded runtime settings.
        overrides: Field values keyed by settings field name; `None` values are ignored.

    Returns:
        AuditSettings: Validated settings copy.

    Raises:
        SettingsLoadError: Raised when an override is invalid.
    """

    updates = {field_name: value for field_name, value in overrides.items() if value is not None}
    if not updates:
        return settings

    try:
        return AuditSettings.model_validate({**settings.model_dump(), **updates})
    except ValidationError as error:
        raise SettingsLoadError(f"Command-line override validation failed. Details: {error}") from error
