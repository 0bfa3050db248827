"""License report retrieval from pnpm or a captured report file."""
from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pnpm_license_checker.constants import PNPM_LICENSES_COMMAND
from pnpm_license_checker.exceptions import ReportError
from pnpm_license_checker.models.report import LICENSE_REPORT_ADAPTER, LicenseReport


def build_pnpm_command(prod: bool = False, dev: bool = False) -> list[str]:
    """Build the pnpm command line for the license report.

    Args:
        prod: Only list production dependencies.
        dev: Only list development dependencies.

    Returns:
        Command as a list of arguments.
    """
    command = list(PNPM_LICENSES_COMMAND)
    if prod:
        command.append("--prod")
    if dev:
        command.append("--dev")
    return command


def run_pnpm_licenses(
    cwd: Optional[Path] = None,
    prod: bool = False,
    dev: bool = False,
) -> str:
    """Run ``pnpm licenses list --json`` and return its standard output.

    Any output on stderr is treated as a failure, since pnpm reports
    problems there even when the exit status is zero.

    Args:
        cwd: Directory to run pnpm in. Defaults to the current directory.
        prod: Only list production dependencies.
        dev: Only list development dependencies.

    Returns:
        Raw JSON text printed by pnpm.

    Raises:
        ReportError: If pnpm is missing, fails, or writes to stderr.
    """
    command = build_pnpm_command(prod=prod, dev=dev)
    try:
        completed = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as e:
        raise ReportError(
            f"Cannot run '{' '.join(command)}': pnpm was not found on PATH"
        ) from e
    except OSError as e:
        raise ReportError(f"Cannot run '{' '.join(command)}': {e}") from e

    if completed.returncode != 0:
        detail = completed.stderr.strip() or completed.stdout.strip()
        raise ReportError(
            f"'{' '.join(command)}' exited with status {completed.returncode}: {detail}"
        )
    if completed.stderr.strip():
        raise ReportError(f"Standard Error: {completed.stderr.strip()}")

    return completed.stdout


def parse_license_report(raw: str) -> LicenseReport:
    """Parse and validate a JSON license report.

    Args:
        raw: JSON text mapping license keys to arrays of package objects.

    Returns:
        Validated report with key order preserved.

    Raises:
        ReportError: If the text is not JSON or does not have the expected shape.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ReportError(f"Failed to parse JSON: {e}") from e

    try:
        return LICENSE_REPORT_ADAPTER.validate_python(data)
    except ValidationError as e:
        messages: list[str] = []
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
            messages.append(f"{loc}: {err['msg']}")
        raise ReportError(f"Invalid license report: {'; '.join(messages)}") from e


def load_report_file(path: Path) -> LicenseReport:
    """Load a license report captured earlier with ``pnpm licenses list --json``.

    Args:
        path: Path to the report file.

    Returns:
        Validated report.

    Raises:
        ReportError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReportError(f"Cannot read license report '{path}': {e}") from e
    return parse_license_report(content)


def get_license_report(
    report_path: Optional[Path] = None,
    cwd: Optional[Path] = None,
    prod: bool = False,
    dev: bool = False,
) -> LicenseReport:
    """Obtain the license report from a file or by running pnpm.

    Args:
        report_path: Captured report to read instead of running pnpm.
        cwd: Directory to run pnpm in.
        prod: Only list production dependencies.
        dev: Only list development dependencies.

    Returns:
        Validated report.

    Raises:
        ReportError: If the report cannot be obtained or parsed.
    """
    if report_path is not None:
        return load_report_file(report_path)
    return parse_license_report(run_pnpm_licenses(cwd=cwd, prod=prod, dev=dev))
