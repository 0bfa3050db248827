"""License analysis logic for pnpm-license-checker."""
from pnpm_license_checker.analysis.compliance import check_report, evaluate
from pnpm_license_checker.analysis.expression import parse_license_key

__all__ = [
    "check_report",
    "evaluate",
    "parse_license_key",
]
