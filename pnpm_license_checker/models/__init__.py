"""Pydantic data models for pnpm-license-checker."""

from pnpm_license_checker.models.compliance import ComplianceResult, Violation
from pnpm_license_checker.models.config import (
    CheckerConfig,
    ConfigDiagnostic,
    ConfigResolution,
    ConfigStatus,
)
from pnpm_license_checker.models.options import CheckOptions, Verbosity
from pnpm_license_checker.models.report import LicenseReport, ReportedPackage

__all__ = [
    "CheckOptions",
    "CheckerConfig",
    "ComplianceResult",
    "ConfigDiagnostic",
    "ConfigResolution",
    "ConfigStatus",
    "LicenseReport",
    "ReportedPackage",
    "Verbosity",
    "Violation",
]
