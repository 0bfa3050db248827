"""License key normalization for disjunctive ("OR") license expressions."""
from __future__ import annotations

import re

# Case-sensitive and not word-bounded: "MIT OR ISC" and "MITORISC" split alike
_OR_SEPARATOR = re.compile(r"\s*OR\s*")


def parse_license_key(license_key: str) -> list[str]:
    """Split a license key into its individual license identifiers.

    Parentheses are removed wherever they appear and the remainder is split
    on ``OR``. This is a plain string transform rather than an SPDX parser:
    it never fails, keeps duplicates, and may return empty strings for
    malformed keys such as a dangling ``OR``.

    Args:
        license_key: License key from the report, e.g. "(MIT OR Apache-2.0)".

    Returns:
        Individual licenses in left-to-right order, e.g. ["MIT", "Apache-2.0"].
    """
    stripped = license_key.replace("(", "").replace(")", "")
    return [license_id.strip() for license_id in _OR_SEPARATOR.split(stripped)]
