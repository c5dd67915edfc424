# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Data classes describing built projects and build results.
"""

from .build import BuildOutcome, BuildStatus, Commit, Project

__all__ = [
    "BuildOutcome",
    "BuildStatus",
    "Commit",
    "Project",
]
