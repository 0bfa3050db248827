"""Compliance result Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A license key that is not fully allowed for some packages.

    Produced only when at least one individual license of the key is not
    allow-listed and at least one package under the key is not itself
    allow-listed.
    """

    model_config = {"extra": "forbid", "frozen": True}

    license_key: str = Field(description="License key as it appears in the report")
    affected_packages: list[str] = Field(
        description="Packages under the key that are not individually allowed"
    )
    invalid_licenses: list[str] = Field(
        description="Individual licenses of the key missing from the allow-list"
    )


class ComplianceResult(BaseModel):
    """Result of checking a license report against the configuration."""

    model_config = {"extra": "forbid"}

    violations: list[Violation] = Field(default_factory=list)
    license_keys_checked: int = Field(default=0, description="License keys in the report")
    packages_checked: int = Field(default=0, description="Package entries in the report")
    exempted_packages: list[str] = Field(
        default_factory=list,
        description="Packages skipped because they are in allowedPackages",
    )

    @property
    def has_violations(self) -> bool:
        """Check if any unsupported license was found.

        Returns:
            True if at least one violation exists, False otherwise.
        """
        return len(self.violations) > 0
