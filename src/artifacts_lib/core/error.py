# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout artifacts.

Absent configuration is never an error: a missing archive root or a missing
per-type config file falls back to defaults with a warning. The exceptions
below cover conditions that must reach the caller. Each exception carries an
associated exit code used by artifacts commands to report failures consistently.
"""

from .config import CFG


class ArtifactsError(Exception):
    """Common exception type for all recoverable artifacts errors."""

    exit_code = CFG.exit_codes.default


class ArtifactsConfigError(ArtifactsError):
    """Raised when a per-type config file exists but cannot be parsed."""

    pass
