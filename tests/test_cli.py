"""CLI behavior tests for pnpm-license-checker."""
from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pnpm_license_checker import __version__
from pnpm_license_checker.cli import main
from pnpm_license_checker.constants import (
    DEFAULT_ALLOWED_LICENSES,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VIOLATIONS,
)

WriteConfig = Callable[[Path, Any], Path]

SAMPLE_REPORT = {
    "(MIT OR Apache-2.0)": [{"name": "package1"}],
    "GPL-3.0": [{"name": "package2"}],
}


@pytest.fixture
def report_file(tmp_path: Path) -> Path:
    """Write the sample report to a file."""
    path = tmp_path / "licenses.json"
    path.write_text(json.dumps(SAMPLE_REPORT))
    return path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory below tmp_path."""
    path = tmp_path / "project"
    path.mkdir()
    return path


def _check(
    cli_runner: CliRunner, project_dir: Path, report_file: Path, *extra: str
) -> Any:
    return cli_runner.invoke(
        main,
        ["check", "--dir", str(project_dir), "--report", str(report_file), *extra],
    )


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help outputs usage information."""
    result = cli_runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "pnpm License Checker" in result.output
    assert "check" in result.output
    assert "--version" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version outputs correct version."""
    result = cli_runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_help(cli_runner: CliRunner) -> None:
    """Test that check --help lists its options."""
    result = cli_runner.invoke(main, ["check", "--help"])

    assert result.exit_code == 0
    for option in ("--format", "--config", "--report", "--dir", "--prod", "--dev"):
        assert option in result.output


class TestCheckExitCodes:
    """Tests for check command exit codes."""

    def test_violation_exits_with_violations_code(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that an unsupported license fails the run."""
        write_config(project_dir, {})

        result = _check(cli_runner, project_dir, report_file)

        assert result.exit_code == EXIT_VIOLATIONS
        assert "Unsupported License(s) Detected: GPL-3.0" in result.output
        assert "Affected Packages: package2" in result.output
        assert "One or more packages have unsupported licenses." in result.output

    def test_allowed_package_passes(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that allow-listing the offending package passes the run."""
        write_config(project_dir, {"allowedPackages": ["package2"]})

        result = _check(cli_runner, project_dir, report_file)

        assert result.exit_code == EXIT_SUCCESS
        assert "All packages have supported licenses." in result.output
        assert "Loaded configuration from" in result.output

    def test_explicit_config_file_is_used(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that --config takes precedence over the discovered file."""
        write_config(project_dir, {})
        explicit = tmp_path / "ci-licenses.json"
        explicit.write_text(json.dumps({"allowedPackages": ["package2"]}))

        result = _check(cli_runner, project_dir, report_file, "--config", str(explicit))

        assert result.exit_code == EXIT_SUCCESS
        assert "All packages have supported licenses." in result.output

    def test_allowed_license_passes(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that allow-listing the license passes the run."""
        write_config(
            project_dir, {"allowedLicenses": ["MIT", "Apache-2.0", "GPL-3.0"]}
        )

        result = _check(cli_runner, project_dir, report_file)

        assert result.exit_code == EXIT_SUCCESS

    def test_partial_disjunction_fails(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that one allowed OR alternative is not enough."""
        write_config(project_dir, {"allowedLicenses": ["MIT"], "allowedPackages": ["package2"]})

        result = _check(cli_runner, project_dir, report_file)

        assert result.exit_code == EXIT_VIOLATIONS
        assert "Unsupported License(s) Detected: Apache-2.0" in result.output
        assert "Affected Packages: package1" in result.output

    def test_malformed_config_warns_and_uses_defaults(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that a broken discovered config is not fatal."""
        write_config(project_dir, "{ broken")

        result = _check(cli_runner, project_dir, report_file)

        assert result.exit_code == EXIT_VIOLATIONS
        assert "Invalid JSON" in result.output

    def test_invalid_report_exits_with_error(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        tmp_path: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that an unparsable report is an error, not a pass."""
        write_config(project_dir, {})
        bad_report = tmp_path / "bad.json"
        bad_report.write_text("not json")

        result = _check(cli_runner, project_dir, bad_report)

        assert result.exit_code == EXIT_ERROR
        assert "Error: ReportError" in result.output

    def test_invalid_explicit_config_exits_with_error(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        tmp_path: Path,
    ) -> None:
        """Test that a broken --config file is fatal."""
        bad_config = tmp_path / "bad-config.json"
        bad_config.write_text("[")

        result = _check(
            cli_runner, project_dir, report_file, "--config", str(bad_config)
        )

        assert result.exit_code == EXIT_ERROR
        assert "Error: ConfigurationError" in result.output

    def test_pnpm_failure_exits_with_error(
        self, cli_runner: CliRunner, project_dir: Path, write_config: WriteConfig
    ) -> None:
        """Test that a failing pnpm command is an error."""
        write_config(project_dir, {})
        failed = subprocess.CompletedProcess(
            args=["pnpm"], returncode=1, stdout="", stderr="ERR_PNPM"
        )

        with patch("pnpm_license_checker.report.subprocess.run", return_value=failed):
            result = cli_runner.invoke(main, ["check", "--dir", str(project_dir)])

        assert result.exit_code == EXIT_ERROR
        assert "Error: ReportError" in result.output


class TestCheckOptions:
    """Tests for check command options."""

    def test_runs_pnpm_in_project_dir(
        self, cli_runner: CliRunner, project_dir: Path, write_config: WriteConfig
    ) -> None:
        """Test that pnpm runs in --dir with --prod forwarded."""
        write_config(project_dir, {})
        completed = subprocess.CompletedProcess(
            args=["pnpm"], returncode=0, stdout=json.dumps({"MIT": [{"name": "a"}]}), stderr=""
        )

        with patch(
            "pnpm_license_checker.report.subprocess.run", return_value=completed
        ) as mock_run:
            result = cli_runner.invoke(
                main, ["check", "--dir", str(project_dir), "--prod"]
            )

        assert result.exit_code == EXIT_SUCCESS
        assert mock_run.call_args.kwargs["cwd"] == project_dir
        assert mock_run.call_args.args[0] == ["pnpm", "licenses", "list", "--json", "--prod"]

    def test_json_format(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that --format json emits a parsable document."""
        write_config(project_dir, {})

        result = _check(cli_runner, project_dir, report_file, "--format", "json")

        assert result.exit_code == EXIT_VIOLATIONS
        data = json.loads(result.output)
        assert data["summary"]["status"] == "violations_found"
        assert data["violations"][0]["license_key"] == "GPL-3.0"
        assert data["metadata"]["config_status"] == "loaded"

    def test_verbose_shows_report_table(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that --verbose prints the report and statistics."""
        write_config(project_dir, {})

        result = _check(cli_runner, project_dir, report_file, "--verbose")

        assert "Licenses Data" in result.output
        assert "Packages checked: 2" in result.output

    def test_quiet_hides_config_info(
        self,
        cli_runner: CliRunner,
        project_dir: Path,
        report_file: Path,
        write_config: WriteConfig,
    ) -> None:
        """Test that --quiet hides informational messages."""
        write_config(project_dir, {"allowedPackages": ["package2"]})

        result = _check(cli_runner, project_dir, report_file, "--quiet")

        assert result.exit_code == EXIT_SUCCESS
        assert "Loaded configuration" not in result.output
        assert "All packages have supported licenses." in result.output

    def test_verbose_and_quiet_are_exclusive(
        self, cli_runner: CliRunner, project_dir: Path, report_file: Path
    ) -> None:
        """Test that --verbose and --quiet cannot be combined."""
        result = _check(cli_runner, project_dir, report_file, "--verbose", "--quiet")

        assert result.exit_code != 0
        assert "mutually exclusive" in result.output

    def test_prod_and_dev_are_exclusive(
        self, cli_runner: CliRunner, project_dir: Path, report_file: Path
    ) -> None:
        """Test that --prod and --dev cannot be combined."""
        result = _check(cli_runner, project_dir, report_file, "--prod", "--dev")

        assert result.exit_code != 0
        assert "mutually exclusive" in result.output


class TestConfigCommand:
    """Tests for the config command."""

    def test_prints_effective_config(
        self, cli_runner: CliRunner, project_dir: Path, write_config: WriteConfig
    ) -> None:
        """Test that the merged configuration is printed as JSON."""
        write_config(project_dir, {"allowedPackages": ["pkg"]})

        result = cli_runner.invoke(main, ["config", "--dir", str(project_dir)])

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output[result.output.index("{"):])
        assert data == {
            "allowedPackages": ["pkg"],
            "allowedLicenses": list(DEFAULT_ALLOWED_LICENSES),
        }

    def test_help_mentions_dropped_entries(self, cli_runner: CliRunner) -> None:
        """Test that config --help explains that non-string entries are dropped."""
        result = cli_runner.invoke(main, ["config", "--help"])

        assert result.exit_code == 0
        help_text = " ".join(result.output.split())
        assert "that are not strings can never match" in help_text

    def test_non_string_entries_dropped(
        self, cli_runner: CliRunner, project_dir: Path, write_config: WriteConfig
    ) -> None:
        """Test that non-string array entries are omitted with a warning."""
        write_config(project_dir, {"allowedPackages": ["pkg", 3]})

        result = cli_runner.invoke(main, ["config", "--dir", str(project_dir)])

        assert result.exit_code == EXIT_SUCCESS
        assert "Ignoring 1 entry(ies)" in " ".join(result.output.split())
        data = json.loads(result.output[result.output.index("{"):])
        assert data["allowedPackages"] == ["pkg"]

    def test_explicit_config_printed(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that config --config prints the named file's settings."""
        explicit = tmp_path / "ci-licenses.json"
        explicit.write_text(json.dumps({"allowedLicenses": ["MIT"]}))

        result = cli_runner.invoke(main, ["config", "--config", str(explicit)])

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output[result.output.index("{"):])
        assert data == {"allowedPackages": [], "allowedLicenses": ["MIT"]}

    def test_invalid_explicit_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid --config file exits with an error."""
        bad_config = tmp_path / "bad.json"
        bad_config.write_text("nope")

        result = cli_runner.invoke(main, ["config", "--config", str(bad_config)])

        assert result.exit_code == EXIT_ERROR
        assert "Error: ConfigurationError" in result.output
