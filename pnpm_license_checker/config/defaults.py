"""Default configuration values for pnpm-license-checker."""

from __future__ import annotations

from pnpm_license_checker.constants import CONFIG_FILE_NAME, DEFAULT_ALLOWED_LICENSES
from pnpm_license_checker.models.config import CheckerConfig

__all__ = ["CONFIG_FILE_NAME", "DEFAULT_ALLOWED_LICENSES", "get_default_config"]


def get_default_config() -> CheckerConfig:
    """Get the default configuration.

    Returns:
        CheckerConfig with no allowed packages and the built-in license list.
    """
    return CheckerConfig(allowed_packages=(), allowed_licenses=DEFAULT_ALLOWED_LICENSES)
