# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Resolved archiving plan of a single build.

An `ArchivePlan` is computed anew for every delivery and describes where the
artifacts of a commit go and which artifact types are moved or skipped.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .overrides import ArtifactOverrides


class SkipReason(Enum):
    """
    Reason for not archiving an artifact type.
    """

    DISABLED = 1
    MISSING = 2

    def __str__(self):
        return self.name.lower()


@dataclass(frozen=True)
class ArchiveEntry:
    """
    Resolved source and destination of one artifact type.
    """

    # Name of the artifact type
    name: str

    # Directory the artifacts are moved from; None if the type is disabled
    source: Path | None

    # Directory the artifacts are moved into
    destination: Path

    # Why the artifact type is not archived; None if it is
    skipped: SkipReason | None = None

    @property
    def archived(self) -> bool:
        return self.skipped is None


@dataclass(frozen=True)
class ArchivePlan:
    """
    Resolved archive root, archive directory and per-type entries.
    """

    root: Path
    archive_dir: Path
    overrides: ArtifactOverrides
    entries: tuple[ArchiveEntry, ...]

    @property
    def moves(self) -> list[ArchiveEntry]:
        """Entries that are moved, in archiving order."""
        return [entry for entry in self.entries if entry.archived]
