"""Configuration Pydantic models for pnpm-license-checker."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from pnpm_license_checker.constants import DEFAULT_ALLOWED_LICENSES


class CheckerConfig(BaseModel):
    """Effective configuration used to evaluate a license report.

    Field names follow Python conventions; the camelCase names used in
    ``.pnpm-license-checker.json`` are accepted as aliases.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    allowed_packages: tuple[str, ...] = Field(
        default=(),
        alias="allowedPackages",
        description="Package names exempt from license checking.",
    )
    allowed_licenses: tuple[str, ...] = Field(
        default=DEFAULT_ALLOWED_LICENSES,
        alias="allowedLicenses",
        description="License identifiers accepted for any package. "
        "Replaces the built-in list when configured.",
    )


class ConfigStatus(Enum):
    """Where the effective configuration came from."""

    DEFAULT = "default"  # No configuration file found
    LOADED = "loaded"  # File found and parsed
    INVALID = "invalid"  # File found but unreadable or malformed


class ConfigDiagnostic(BaseModel):
    """A message produced while resolving the configuration."""

    model_config = {"extra": "forbid", "frozen": True}

    level: Literal["info", "warning"] = Field(description="Severity of the message")
    message: str = Field(description="Human readable description")


class ConfigResolution(BaseModel):
    """Outcome of configuration discovery and validation."""

    model_config = {"extra": "forbid"}

    config: CheckerConfig = Field(default_factory=CheckerConfig)
    config_path: Optional[Path] = Field(
        default=None,
        description="Configuration file that was found (None if not found)",
    )
    status: ConfigStatus = Field(default=ConfigStatus.DEFAULT)
    diagnostics: list[ConfigDiagnostic] = Field(default_factory=list)

    @property
    def warnings(self) -> list[ConfigDiagnostic]:
        """Diagnostics at warning level.

        Returns:
            Warning diagnostics in the order they were produced.
        """
        return [d for d in self.diagnostics if d.level == "warning"]
