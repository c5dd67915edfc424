# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Filesystem gateway used by the archiver.

`Filesystem` wraps the three primitives the archiver needs (existence check,
recursive directory creation and forced move) so that every side effect of
archiving flows through a single, replaceable object.
"""

import shutil
from pathlib import Path

from .logger import get_logger

logger = get_logger(__name__)


class Filesystem:
    """
    Local filesystem operations performed on behalf of the archiver.
    """

    def exists(self, path: Path) -> bool:
        """
        Check whether a file or directory exists.

        Args:
            path (Path): Path to check.

        Returns:
            bool: True if the path exists.
        """
        return path.exists()

    def makeDirs(self, directory: Path) -> None:
        """
        Create a directory including all missing parents.

        Args:
            directory (Path): Directory to create.

        Raises:
            OSError: If the directory cannot be created.
        """
        logger.debug(f"Creating directory '{directory}'.")
        directory.mkdir(parents=True, exist_ok=True)

    def move(self, source: Path, destination: Path, force: bool = True) -> None:
        """
        Move `source` to `destination`.

        If `destination` is an existing directory, `source` is moved into it,
        keeping its name. With `force`, an entry already occupying the target
        location is removed first.

        Args:
            source (Path): File or directory to move.
            destination (Path): Target path or an existing directory to move into.
            force (bool): Replace an existing target. Defaults to True.

        Raises:
            OSError: If the target exists and `force` is False, or the move fails.
        """
        target = destination / source.name if destination.is_dir() else destination

        if target.exists() or target.is_symlink():
            if not force:
                raise FileExistsError(f"Target '{target}' already exists.")

            logger.debug(f"Replacing existing '{target}'.")
            Filesystem._remove(target)

        logger.debug(f"Moving '{source}' to '{target}'.")
        shutil.move(str(source), str(target))

    @staticmethod
    def _remove(path: Path) -> None:
        """
        Remove a file, symlink or directory tree.

        Args:
            path (Path): Path to remove.
        """
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
