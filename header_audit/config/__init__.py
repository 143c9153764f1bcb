"""Configuration package for runtime settings and startup validation."""

from .settings import AuditSettings, SettingsLoadError, config_apply_overrides, config_load_settings

__all__ = ["AuditSettings", "SettingsLoadError", "config_apply_overrides", "config_load_settings"]
