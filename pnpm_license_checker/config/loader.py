"""Configuration file discovery and loading for pnpm-license-checker."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pnpm_license_checker.config.defaults import (
    CONFIG_FILE_NAME,
    DEFAULT_ALLOWED_LICENSES,
    get_default_config,
)
from pnpm_license_checker.exceptions import ConfigurationError
from pnpm_license_checker.models.config import (
    CheckerConfig,
    ConfigDiagnostic,
    ConfigResolution,
    ConfigStatus,
)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find the configuration file in the start directory or any ancestor.

    Walks upward one directory at a time until the file is found or the
    filesystem root is reached (a directory that is its own parent).
    Symlinks are not resolved.

    Args:
        start_dir: Directory to start from. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    current_dir = (start_dir or Path.cwd()).absolute()

    while True:
        config_path = current_dir / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        parent_dir = current_dir.parent
        if parent_dir == current_dir:
            # Reached the root directory
            return None
        current_dir = parent_dir


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a configuration file into a loosely typed JSON object.

    Args:
        path: Path to the configuration file.

    Returns:
        The decoded top-level JSON object.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or its root is not an object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected an object at root level, got {_json_type_name(data)}"
        )
    return data


def build_config(
    data: dict[str, Any], path: Path
) -> tuple[CheckerConfig, list[ConfigDiagnostic]]:
    """Validate the recognized fields of a decoded configuration.

    Each field is validated on its own; a malformed field falls back to its
    default without affecting the other one.

    Args:
        data: Decoded top-level JSON object.
        path: Path of the file, used in diagnostic messages.

    Returns:
        Tuple of the effective configuration and any warnings produced.
    """
    diagnostics: list[ConfigDiagnostic] = []

    allowed_packages = _validate_string_list(
        data,
        "allowedPackages",
        default=(),
        default_description="an empty list",
        path=path,
        diagnostics=diagnostics,
    )
    allowed_licenses = _validate_string_list(
        data,
        "allowedLicenses",
        default=DEFAULT_ALLOWED_LICENSES,
        default_description="the built-in license list",
        path=path,
        diagnostics=diagnostics,
    )

    config = CheckerConfig(
        allowed_packages=allowed_packages,
        allowed_licenses=allowed_licenses,
    )
    return config, diagnostics


def _validate_string_list(
    data: dict[str, Any],
    field: str,
    *,
    default: tuple[str, ...],
    default_description: str,
    path: Path,
    diagnostics: list[ConfigDiagnostic],
) -> tuple[str, ...]:
    """Validate one array-of-strings field, appending warnings as needed."""
    if field not in data:
        return default

    value = data[field]
    if not isinstance(value, list):
        diagnostics.append(
            ConfigDiagnostic(
                level="warning",
                message=(
                    f"Invalid format in {path}: {field} should be an array, "
                    f"got {_json_type_name(value)}. "
                    f"Defaulting to {default_description}."
                ),
            )
        )
        return default

    # Exact string matching means non-string entries could never match
    strings = tuple(item for item in value if isinstance(item, str))
    if len(strings) != len(value):
        diagnostics.append(
            ConfigDiagnostic(
                level="warning",
                message=(
                    f"Invalid entries in {path}: {field} should contain only "
                    f"strings. Ignoring {len(value) - len(strings)} entry(ies)."
                ),
            )
        )
    return strings


def _json_type_name(value: Any) -> str:
    """Name a decoded JSON value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def load_config_file(path: Path) -> ConfigResolution:
    """Load and validate configuration from a file.

    Args:
        path: Path to the configuration file.

    Returns:
        ConfigResolution with status LOADED and any field warnings.

    Raises:
        ConfigurationError: If the file cannot be read or is not a JSON object.
    """
    data = read_config_file(path)
    config, field_diagnostics = build_config(data, path)

    diagnostics = [ConfigDiagnostic(level="info", message=f"Loaded configuration from {path}.")]
    diagnostics.extend(field_diagnostics)

    return ConfigResolution(
        config=config,
        config_path=path,
        status=ConfigStatus.LOADED,
        diagnostics=diagnostics,
    )


def resolve_config(
    start_dir: Path | None = None,
    config_path: Optional[str | Path] = None,
) -> ConfigResolution:
    """Resolve the effective configuration.

    If a config_path is provided, loads from that file and any read or
    parse failure is fatal. Otherwise searches upward from start_dir; a
    discovered file that cannot be read or parsed is reported as a warning
    and the defaults are used, exactly as when no file exists.

    Args:
        start_dir: Directory to start discovery from. Defaults to cwd.
        config_path: Optional explicit path to a configuration file.

    Returns:
        ConfigResolution with the effective configuration and diagnostics.

    Raises:
        ConfigurationError: If the explicitly specified file is invalid.
    """
    if config_path is not None:
        # User specified a path - failures are not recoverable
        return load_config_file(Path(config_path))

    discovered = find_config_file(start_dir)
    if discovered is None:
        return ConfigResolution(
            config=get_default_config(),
            status=ConfigStatus.DEFAULT,
            diagnostics=[
                ConfigDiagnostic(
                    level="info",
                    message=(
                        f"No {CONFIG_FILE_NAME} file found. "
                        "Using default configuration."
                    ),
                )
            ],
        )

    try:
        return load_config_file(discovered)
    except ConfigurationError as e:
        return ConfigResolution(
            config=get_default_config(),
            config_path=discovered,
            status=ConfigStatus.INVALID,
            diagnostics=[
                ConfigDiagnostic(
                    level="warning",
                    message=f"{e}. Using default configuration.",
                )
            ],
        )


def resolve(start_dir: Path | None = None) -> CheckerConfig:
    """Resolve the effective configuration for a directory.

    Args:
        start_dir: Directory to start discovery from. Defaults to cwd.

    Returns:
        The effective CheckerConfig.
    """
    return resolve_config(start_dir).config
