"""License compliance checking against the allowed packages and licenses."""
from __future__ import annotations

from pnpm_license_checker.analysis.expression import parse_license_key
from pnpm_license_checker.models.compliance import ComplianceResult, Violation
from pnpm_license_checker.models.config import CheckerConfig
from pnpm_license_checker.models.report import LicenseReport


def evaluate(config: CheckerConfig, report: LicenseReport) -> list[Violation]:
    """Find the license keys in a report that are not fully allowed.

    A key such as "(MIT OR Apache-2.0)" is accepted only when EVERY
    alternative is in ``allowed_licenses``. Packages listed in
    ``allowed_packages`` are exempt; a key whose packages are all exempt
    never produces a violation. Matching is exact and case-sensitive.

    Args:
        config: Effective configuration.
        report: License key to packages mapping, in report order.

    Returns:
        Violations in report order. Empty if the report is compliant.
    """
    allowed_packages = set(config.allowed_packages)
    allowed_licenses = set(config.allowed_licenses)
    violations: list[Violation] = []

    for license_key, packages in report.items():
        individual_licenses = parse_license_key(license_key)

        affected_packages = [
            pkg.name for pkg in packages if pkg.name not in allowed_packages
        ]
        if not affected_packages:
            continue

        invalid_licenses = [
            license_id
            for license_id in individual_licenses
            if license_id not in allowed_licenses
        ]
        if invalid_licenses:
            violations.append(
                Violation(
                    license_key=license_key,
                    affected_packages=affected_packages,
                    invalid_licenses=invalid_licenses,
                )
            )

    return violations


def check_report(config: CheckerConfig, report: LicenseReport) -> ComplianceResult:
    """Evaluate a report and summarize it for display.

    Args:
        config: Effective configuration.
        report: License report to check.

    Returns:
        ComplianceResult with violations and report statistics.
    """
    allowed_packages = set(config.allowed_packages)
    exempted = [
        pkg.name
        for packages in report.values()
        for pkg in packages
        if pkg.name in allowed_packages
    ]

    return ComplianceResult(
        violations=evaluate(config, report),
        license_keys_checked=len(report),
        packages_checked=sum(len(packages) for packages in report.values()),
        exempted_packages=exempted,
    )
