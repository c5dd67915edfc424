# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Archiving of build artifacts.

This module provides the `ArtifactArchiver` class, which moves the output
directories of registered artifact types from a build's working tree into
the per-project, per-commit archive, together with the options, per-type
overrides and plans it works with.
"""

from .archiver import ArtifactArchiver
from .form import FieldDescriptor, form_schema
from .options import ArchiverOptions
from .overrides import ArtifactOverrides, ArtifactTypeOverride
from .plan import ArchiveEntry, ArchivePlan, SkipReason
from .types import DEFAULT_ARTIFACT_TYPES, ArtifactTypeSpec

__all__ = [
    "ArchiveEntry",
    "ArchivePlan",
    "ArchiverOptions",
    "ArtifactArchiver",
    "ArtifactOverrides",
    "ArtifactTypeOverride",
    "ArtifactTypeSpec",
    "DEFAULT_ARTIFACT_TYPES",
    "FieldDescriptor",
    "SkipReason",
    "form_schema",
]
