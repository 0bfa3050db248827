"""Configuration handling for pnpm-license-checker."""
from __future__ import annotations

from pnpm_license_checker.config.defaults import (
    CONFIG_FILE_NAME,
    DEFAULT_ALLOWED_LICENSES,
    get_default_config,
)
from pnpm_license_checker.config.loader import (
    find_config_file,
    load_config_file,
    resolve,
    resolve_config,
)
from pnpm_license_checker.models.config import (
    CheckerConfig,
    ConfigDiagnostic,
    ConfigResolution,
    ConfigStatus,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "CheckerConfig",
    "ConfigDiagnostic",
    "ConfigResolution",
    "ConfigStatus",
    "DEFAULT_ALLOWED_LICENSES",
    "find_config_file",
    "get_default_config",
    "load_config_file",
    "resolve",
    "resolve_config",
]
