"""Output formatters for pnpm-license-checker."""

from pnpm_license_checker.output.compliance_json import ComplianceJsonFormatter
from pnpm_license_checker.output.terminal import TerminalFormatter

__all__ = [
    "ComplianceJsonFormatter",
    "TerminalFormatter",
]
