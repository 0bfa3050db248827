"""JSON output formatter for compliance results."""
import json
from datetime import datetime, timezone
from typing import Any

from pnpm_license_checker import __version__
from pnpm_license_checker.models.compliance import ComplianceResult
from pnpm_license_checker.models.config import ConfigResolution


class ComplianceJsonFormatter:
    """Format compliance results as JSON output.

    Intended for CI pipelines that post-process the check outcome.
    """

    def format_result(
        self, result: ComplianceResult, resolution: ConfigResolution
    ) -> str:
        """Format a compliance result as JSON string.

        Args:
            result: The compliance result to format.
            resolution: The configuration the result was computed with.

        Returns:
            JSON string representation of the result.
        """
        output = {
            "metadata": self._build_metadata(resolution),
            "summary": self._build_summary(result),
            "violations": [
                violation.model_dump(mode="json") for violation in result.violations
            ],
        }
        return json.dumps(output, indent=2)

    def _build_metadata(self, resolution: ConfigResolution) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "config_path": (
                str(resolution.config_path) if resolution.config_path else None
            ),
            "config_status": resolution.status.value,
            "config_warnings": [d.message for d in resolution.warnings],
        }

    def _build_summary(self, result: ComplianceResult) -> dict[str, Any]:
        return {
            "status": "violations_found" if result.has_violations else "pass",
            "license_keys_checked": result.license_keys_checked,
            "packages_checked": result.packages_checked,
            "exempted_packages": result.exempted_packages,
            "violation_count": len(result.violations),
        }
