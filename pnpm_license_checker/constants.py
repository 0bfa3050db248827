"""Constants for pnpm-license-checker."""

# Exit codes
EXIT_SUCCESS = 0  # All packages have supported licenses
EXIT_VIOLATIONS = 1  # One or more unsupported licenses found
EXIT_ERROR = 2  # Check could not run (report unobtainable, bad --config)

# Name of the configuration file searched for from the working directory up
CONFIG_FILE_NAME = ".pnpm-license-checker.json"

# Command producing the license report
PNPM_LICENSES_COMMAND = ("pnpm", "licenses", "list", "--json")

SUCCESS_MESSAGE = "All packages have supported licenses."
FAILURE_MESSAGE = "One or more packages have unsupported licenses."

# Licenses accepted when no configuration file provides ``allowedLicenses``.
# A tuple so that no consumer can extend or reorder it in place.
DEFAULT_ALLOWED_LICENSES: tuple[str, ...] = (
    "Apache-2.0",
    "All Rights Reserved",
    "Artistic-2.0",
    "BlueOak-1.0.0",
    "0BSD",
    "BSD",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "CC0-1.0",
    "CC-BY-4.0",
    "CC BY-SA 4.0",
    "ISC",
    "LGPL-3.0-or-later",
    "MIT",
    "MIT-0",
    "MPL-2.0",
    "Public Domain",
    "Python-2.0",
    "Unicode-DFS-2016",
    "Unlicense",
    "UNLICENSED",
)
