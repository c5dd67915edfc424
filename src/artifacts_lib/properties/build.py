# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Representation of finished builds.

This module defines the minimal view of a build that the archiver needs:
the `Project` that was built, the `Commit` and the working tree it was built
in, and the `BuildOutcome` reported once the build completes.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Self
from urllib.parse import urlparse

from artifacts_lib.core.error import ArtifactsError

# Number of characters of a commit identifier used to name archive directories.
SHORT_IDENTIFIER_LENGTH = 7


class BuildStatus(Enum):
    """
    Final status of a build.
    """

    SUCCEEDED = 1
    FAILED = 2

    def __str__(self):
        return self.name.lower()

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding BuildStatus enum variant.

        Args:
            s (str): String representation of the status (case-insensitive).

        Returns:
            BuildStatus variant.

        Raises:
            ArtifactsError if the string corresponds to no BuildStatus.
        """
        try:
            return cls[s.upper()]
        except KeyError:
            raise ArtifactsError(f"Could not recognize a build status '{s}'.")


@dataclass(frozen=True)
class Project:
    """
    A project registered in the CI server.
    """

    # Name of the project, used as the first level of the archive.
    name: str

    # URI of the project's repository
    uri: str

    # Branch that is built
    branch: str = "master"

    def workingTreeName(self) -> str:
        """
        Name of the directory the project's branch is checked out into.

        The repository path of the URI with slashes replaced by dashes and
        without a trailing `.git`, followed by the branch name.

        Returns:
            str: Name of the working tree directory.
        """
        path = urlparse(self.uri).path if "://" in self.uri else self.uri
        # scp-like URIs (git@host:user/repo.git)
        path = path.split(":", maxsplit=1)[-1]
        path = path.strip("/").removesuffix(".git")

        return f"{path.replace('/', '-')}-{self.branch}"

    def workingTree(self, export_directory: Path) -> Path:
        """
        Absolute path to the project's working tree.

        Args:
            export_directory (Path): Directory containing all working trees.

        Returns:
            Path: Path to the working tree.
        """
        return export_directory / self.workingTreeName()


@dataclass(frozen=True)
class Commit:
    """
    A built commit of a project.
    """

    # Full commit identifier
    identifier: str

    # Project the commit belongs to
    project: Project

    # Working tree the commit was built in
    working_tree: Path

    @property
    def short_identifier(self) -> str:
        """Abbreviated commit identifier."""
        return self.identifier[:SHORT_IDENTIFIER_LENGTH]


@dataclass(frozen=True)
class BuildOutcome:
    """
    Result of a completed build.
    """

    status: BuildStatus
    commit: Commit

    @property
    def succeeded(self) -> bool:
        return self.status == BuildStatus.SUCCEEDED
