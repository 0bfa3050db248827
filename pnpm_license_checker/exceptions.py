"""Custom exceptions for pnpm-license-checker."""


class LicenseCheckerError(Exception):
    """Base exception for all pnpm-license-checker errors."""

    pass


class ConfigurationError(LicenseCheckerError):
    """Exception raised when an explicitly requested configuration is invalid."""

    pass


class ReportError(LicenseCheckerError):
    """Exception raised when the license report cannot be obtained or parsed."""

    pass
