"""Models for the license report produced by ``pnpm licenses list --json``."""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter


class ReportedPackage(BaseModel):
    """A package listed under a license key in the pnpm report.

    pnpm copies fields such as ``homepage`` and ``description`` from each
    dependency's package.json, so their shapes vary. Only ``name`` is
    validated; everything else is ignored.
    """

    model_config = {"extra": "ignore", "frozen": True}

    name: str = Field(description="Package name")


# License key (e.g. "MIT" or "(MIT OR Apache-2.0)") to the packages declaring it.
# Key order follows the report and determines the order of violations.
LicenseReport = dict[str, list[ReportedPackage]]

LICENSE_REPORT_ADAPTER: TypeAdapter[LicenseReport] = TypeAdapter(LicenseReport)
