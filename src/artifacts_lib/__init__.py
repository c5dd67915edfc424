# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Post-build artifact archiver for continuous integration.

This package moves generated output directories (coverage, metrics data)
of successful builds from the build's working tree into a per-project,
per-commit archive, honoring optional per-type configuration overrides
and falling back to defaults when configuration or directories are absent.
"""

from .artifacts import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "archive",
    "core",
    "fields",
    "properties",
]
