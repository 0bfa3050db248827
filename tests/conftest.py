"""Shared fixtures for pnpm-license-checker tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner

from pnpm_license_checker.constants import CONFIG_FILE_NAME
from pnpm_license_checker.models.report import LicenseReport, ReportedPackage


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_config() -> Callable[[Path, Any], Path]:
    """Write a .pnpm-license-checker.json file into a directory."""

    def _write(directory: Path, content: Any) -> Path:
        config_file = directory / CONFIG_FILE_NAME
        if isinstance(content, str):
            config_file.write_text(content)
        else:
            config_file.write_text(json.dumps(content))
        return config_file

    return _write


@pytest.fixture
def sample_report() -> LicenseReport:
    """A report with one dual-licensed and one GPL package."""
    return {
        "(MIT OR Apache-2.0)": [ReportedPackage(name="package1")],
        "GPL-3.0": [ReportedPackage(name="package2")],
    }
