"""CLI entry point for pnpm-license-checker."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Literal, Optional, cast

import click
from rich.console import Console
from rich.markup import escape

from pnpm_license_checker import __version__
from pnpm_license_checker.analysis.compliance import check_report
from pnpm_license_checker.config import resolve_config
from pnpm_license_checker.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS
from pnpm_license_checker.exceptions import LicenseCheckerError
from pnpm_license_checker.models.compliance import ComplianceResult
from pnpm_license_checker.models.config import ConfigResolution
from pnpm_license_checker.models.options import CheckOptions, Verbosity
from pnpm_license_checker.output.compliance_json import ComplianceJsonFormatter
from pnpm_license_checker.output.terminal import TerminalFormatter
from pnpm_license_checker.report import get_license_report

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """pnpm License Checker - Fail builds on unsupported dependency licenses.

    Reads the output of `pnpm licenses list --json` and checks every
    license against an allow-list configured in .pnpm-license-checker.json
    (searched for from the current directory upward).

    \b
    Examples:
        pnpm-license-checker check
        pnpm-license-checker check --prod
        pnpm-license-checker check --report licenses.json --format json
        pnpm-license-checker config
    """
    pass


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for check results (default: terminal).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (skips discovery).",
)
@click.option(
    "--report",
    "-r",
    "report_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read a captured `pnpm licenses list --json` report instead of running pnpm.",
)
@click.option(
    "--dir",
    "-d",
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory to check (default: current directory).",
)
@click.option(
    "--prod",
    "prod_flag",
    is_flag=True,
    default=False,
    help="Only check production dependencies.",
)
@click.option(
    "--dev",
    "dev_flag",
    is_flag=True,
    default=False,
    help="Only check development dependencies.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show the license report and check statistics.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only violations and the final status.",
)
def check(
    output_format: str,
    config_path: Optional[Path],
    report_path: Optional[Path],
    project_dir: Optional[Path],
    prod_flag: bool,
    dev_flag: bool,
    verbose_flag: bool,
    quiet_flag: bool,
) -> None:
    """Check dependency licenses against the allow-list.

    Exits with status 0 when every package has a supported license,
    1 when unsupported licenses are found and 2 when the check could
    not run.

    \b
    Examples:
        pnpm-license-checker check
        pnpm-license-checker check --dir packages/web
        pnpm-license-checker check --config ci-licenses.json
        pnpm-license-checker check --report licenses.json
        pnpm-license-checker check --format json > result.json
        pnpm-license-checker check --verbose
    """
    # Validate mutual exclusivity
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")
    if prod_flag and dev_flag:
        raise click.UsageError("--prod and --dev are mutually exclusive.")

    # Determine verbosity
    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    format_value = cast(Literal["terminal", "json"], output_format.lower())
    options = CheckOptions(
        format=format_value, verbosity=verbosity, prod=prod_flag, dev=dev_flag
    )

    try:
        resolution = resolve_config(start_dir=project_dir, config_path=config_path)
        result = _run_check(options, resolution, report_path, project_dir)

        if result.has_violations:
            sys.exit(EXIT_VIOLATIONS)
        sys.exit(EXIT_SUCCESS)

    except LicenseCheckerError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command("config")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (skips discovery).",
)
@click.option(
    "--dir",
    "-d",
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to start configuration discovery from.",
)
def show_config(config_path: Optional[Path], project_dir: Optional[Path]) -> None:
    """Print the effective configuration as JSON.

    Resolution messages (which file was used, invalid fields) are
    written to stderr so that stdout stays valid JSON.

    Entries of allowedPackages or allowedLicenses that are not strings
    can never match and are left out of the printed configuration,
    with a warning on stderr.

    \b
    Examples:
        pnpm-license-checker config
        pnpm-license-checker config --dir packages/web
    """
    try:
        resolution = resolve_config(start_dir=project_dir, config_path=config_path)
    except LicenseCheckerError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)

    TerminalFormatter(console=_error_console).format_config_resolution(resolution)
    content = resolution.config.model_dump(mode="json", by_alias=True)
    click.echo(json.dumps(content, indent=2))


def _run_check(
    options: CheckOptions,
    resolution: ConfigResolution,
    report_path: Optional[Path],
    project_dir: Optional[Path],
) -> ComplianceResult:
    """Obtain the report, evaluate it and display the outcome.

    Args:
        options: Check options.
        resolution: Resolved configuration.
        report_path: Optional captured report to read instead of running pnpm.
        project_dir: Directory to run pnpm in.

    Returns:
        ComplianceResult for the report.

    Raises:
        ReportError: If the report cannot be obtained or parsed.
    """
    terminal = options.format == "terminal"
    if terminal:
        formatter = TerminalFormatter(console=_console, verbosity=options.verbosity)
    else:
        # Keep stdout machine readable; warnings still reach the user
        formatter = TerminalFormatter(console=_error_console, verbosity=Verbosity.QUIET)
    formatter.format_config_resolution(resolution)

    report = get_license_report(
        report_path=report_path,
        cwd=project_dir,
        prod=options.prod,
        dev=options.dev,
    )
    result = check_report(resolution.config, report)

    if terminal:
        formatter.format_report(report)
        formatter.format_result(result)
    else:
        click.echo(ComplianceJsonFormatter().format_result(result, resolution))

    return result


def _display_error(error: LicenseCheckerError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
