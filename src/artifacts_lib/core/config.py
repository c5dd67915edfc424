# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for artifacts.

This module defines dataclasses representing the process-wide defaults of
the artifact archiver: base paths of the build working trees and of the
public archive, the table of registered artifact types, environment
variables, date formats and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class PathSettings:
    """Base paths shared by all builds."""

    # Directory containing the working trees of all built projects.
    export_directory: str = "/var/lib/integrity/builds"
    # Default public archive root.
    # If not set, `<parent of export_directory>/public/artifacts` is used.
    artifact_root: str | None = None

    @property
    def default_artifact_root(self) -> Path:
        """Archive root used when no valid override is configured."""
        if self.artifact_root:
            return Path(self.artifact_root)

        return Path(self.export_directory).parent / "public" / "artifacts"


@dataclass
class ArtifactTypeEntry:
    """A single row of the artifact type table."""

    # Name of the artifact type as used in per-type config files.
    name: str
    # Output directory relative to the working tree.
    default_dir: str


def default_artifact_types() -> list[ArtifactTypeEntry]:
    return [
        ArtifactTypeEntry(name="rcov", default_dir="coverage"),
        ArtifactTypeEntry(name="metric_fu", default_dir="tmp/metric_fu"),
    ]


@dataclass
class EnvironmentVariables:
    """Environment variable names used by artifacts."""

    # Enables debug mode.
    debug_mode: str = "ARTIFACTS_DEBUG"


@dataclass
class PresenterSettings:
    """Settings for presenting archive plans and form fields."""

    # Style of the border lines.
    border_style: str = "white"
    # Style of the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for keys.
    key_style: str = "default bold"
    # Style used for values.
    value_style: str = "white"
    # Style used for notes.
    notes_style: str = "grey50"
    # Style used for artifact types that are moved.
    archived_style: str = "bright_green"
    # Style used for artifact types that are skipped.
    skipped_style: str = "bright_yellow"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used in log output.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of artifacts commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for artifacts."""

    paths: PathSettings = field(default_factory=PathSettings)
    artifact_types: list[ArtifactTypeEntry] = field(
        default_factory=default_artifact_types
    )
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    presenter: PresenterSettings = field(default_factory=PresenterSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the artifacts binary.
    binary_name: str = "artifacts"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(
                f"Could not read artifacts config '{config_path}': {e}."
            ) from e

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("ARTIFACTS_CONFIG")) else None,
            # 2. Current working directory
            Path.cwd() / "artifacts_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "artifacts"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses and the artifact type table.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name not in data:
            continue

        value = data[field_name]
        if is_dataclass(field_type) and isinstance(value, dict):
            field_values[field_name] = _dict_to_dataclass(field_type, value)
        elif field_name == "artifact_types" and isinstance(value, list):
            field_values[field_name] = [ArtifactTypeEntry(**row) for row in value]
        else:
            field_values[field_name] = value

    return cls(**field_values)


# Global configuration for artifacts.
CFG = Config.load()
