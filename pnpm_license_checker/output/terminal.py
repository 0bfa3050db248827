"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pnpm_license_checker.constants import FAILURE_MESSAGE, SUCCESS_MESSAGE
from pnpm_license_checker.models.compliance import ComplianceResult
from pnpm_license_checker.models.config import ConfigResolution
from pnpm_license_checker.models.report import LicenseReport
from pnpm_license_checker.models.options import Verbosity


class TerminalFormatter:
    """Format compliance results for terminal display using Rich.

    Unsupported licenses are shown in red, configuration messages in
    green (loaded) or yellow (defaults and warnings).
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_config_resolution(self, resolution: ConfigResolution) -> None:
        """Display the diagnostics produced while resolving configuration.

        Info messages are hidden in quiet mode; warnings are always shown.

        Args:
            resolution: The configuration resolution to report on.
        """
        for diagnostic in resolution.diagnostics:
            message = escape(diagnostic.message)
            if diagnostic.level == "warning":
                self._console.print(f"[yellow]{message}[/yellow]")
            elif self._verbosity != Verbosity.QUIET:
                color = "green" if resolution.config_path is not None else "yellow"
                self._console.print(f"[{color}]{message}[/{color}]")

    def format_report(self, report: LicenseReport) -> None:
        """Display the license report as a table (verbose mode only).

        Args:
            report: The license report to display.
        """
        if self._verbosity != Verbosity.VERBOSE:
            return

        table = Table(title="Licenses Data")
        table.add_column("License", style="green")
        table.add_column("Packages", style="cyan")

        for license_key, packages in report.items():
            names = ", ".join(pkg.name for pkg in packages)
            table.add_row(escape(license_key), escape(names))

        self._console.print(table)

    def format_result(self, result: ComplianceResult) -> None:
        """Display violations followed by the overall status.

        Args:
            result: The compliance result to display.
        """
        for violation in result.violations:
            licenses = escape(", ".join(violation.invalid_licenses))
            packages = escape(", ".join(violation.affected_packages))
            self._console.print(
                f"[red]Unsupported License(s) Detected: {licenses}[/red]"
            )
            self._console.print(f"Affected Packages: {packages}")

        if self._verbosity == Verbosity.VERBOSE:
            self._print_summary(result)

        if result.has_violations:
            self._console.print(f"[red]{FAILURE_MESSAGE}[/red]")
        else:
            self._console.print(f"[green]{SUCCESS_MESSAGE}[/green]")

    def _print_summary(self, result: ComplianceResult) -> None:
        """Print report statistics.

        Args:
            result: The compliance result to summarize.
        """
        self._console.print(
            f"\n[bold]License keys checked:[/bold] {result.license_keys_checked}"
        )
        self._console.print(f"[bold]Packages checked:[/bold] {result.packages_checked}")
        if result.exempted_packages:
            names = escape(", ".join(result.exempted_packages))
            self._console.print(f"[bold]Allowed packages skipped:[/bold] {names}")
        self._console.print(f"[bold]Violations:[/bold] {len(result.violations)}")
