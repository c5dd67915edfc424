# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable
from pathlib import Path
from typing import Self

from artifacts_lib.core.config import CFG, Config
from artifacts_lib.core.filesystem import Filesystem
from artifacts_lib.core.logger import get_logger
from artifacts_lib.properties.build import BuildOutcome, Commit

from .options import ArchiverOptions
from .overrides import ArtifactOverrides
from .plan import ArchiveEntry, ArchivePlan, SkipReason
from .types import DEFAULT_ARTIFACT_TYPES, ArtifactTypeSpec, load_artifact_types

logger = get_logger(__name__, show_time=True)


class ArtifactArchiver:
    """
    Moves generated artifacts of successful builds into the public archive.
    """

    def __init__(
        self,
        default_root: Path,
        artifact_types: Iterable[ArtifactTypeSpec] = DEFAULT_ARTIFACT_TYPES,
        filesystem: Filesystem | None = None,
    ):
        """
        Initialize the ArtifactArchiver.

        Args:
            default_root (Path): Archive root used when no valid override is configured.
            artifact_types (Iterable[ArtifactTypeSpec]): Registered artifact types
                in archiving order. Defaults to the built-in types.
            filesystem (Filesystem | None): Gateway performing all filesystem
                operations. Defaults to the local filesystem.
        """
        self._default_root = default_root
        self._artifact_types = tuple(artifact_types)
        self._fs = filesystem or Filesystem()

    @classmethod
    def fromConfig(
        cls, config: Config = CFG, filesystem: Filesystem | None = None
    ) -> Self:
        """
        Create an archiver using the process-wide defaults.

        Args:
            config (Config): Configuration to take the defaults from.
            filesystem (Filesystem | None): Optional filesystem gateway.

        Returns:
            ArtifactArchiver: The configured archiver.
        """
        return cls(
            default_root=config.paths.default_artifact_root,
            artifact_types=load_artifact_types(config.artifact_types),
            filesystem=filesystem,
        )

    def deliver(
        self, outcome: BuildOutcome, options: ArchiverOptions | None = None
    ) -> ArchivePlan | None:
        """
        Archive the artifacts of a completed build.

        Builds that did not succeed are ignored. Otherwise the archive
        directory `<root>/<project name>/<short identifier>` is created if
        needed, the per-type overrides are loaded, and the artifact types are
        processed one after another: the output directory of an enabled type
        is checked right before it is moved, so a directory taken away by an
        earlier move is skipped like any other missing output.

        Args:
            outcome (BuildOutcome): The completed build.
            options (ArchiverOptions | None): Options of the project.

        Returns:
            ArchivePlan | None: The executed plan or None if the build did not succeed.

        Raises:
            ArtifactsConfigError: If the per-type config file exists but is malformed.
            OSError: If creating the archive directory or moving artifacts fails.
        """
        if not outcome.succeeded:
            logger.debug(f"Build finished as '{outcome.status}'. Nothing to archive.")
            return None

        options = options or ArchiverOptions()
        commit = outcome.commit

        root = self._resolveRoot(options)
        archive_dir = ArtifactArchiver._archiveDir(root, commit)
        if not self._fs.exists(archive_dir):
            self._fs.makeDirs(archive_dir)

        overrides = self._loadOverrides(commit.working_tree, options)

        entries = []
        for spec in self._artifact_types:
            entry = self._resolveEntry(spec, overrides, commit.working_tree, archive_dir)
            if entry.archived:
                logger.info(f"Archiving {entry.name} output '{entry.source}'.")
                self._fs.move(entry.source, entry.destination, force=True)
            entries.append(entry)

        return ArchivePlan(
            root=root,
            archive_dir=archive_dir,
            overrides=overrides,
            entries=tuple(entries),
        )

    def plan(
        self, outcome: BuildOutcome, options: ArchiverOptions | None = None
    ) -> ArchivePlan | None:
        """
        Resolve where the artifacts of a completed build would be archived.

        Performs only existence checks and reads the per-type config file;
        nothing is created or moved. Every source is checked against the
        current state of the working tree, so outputs that `deliver` would
        move away before reaching a later type are still reported as present.

        Args:
            outcome (BuildOutcome): The completed build.
            options (ArchiverOptions | None): Options of the project.

        Returns:
            ArchivePlan | None: The resolved plan or None if the build did not succeed.

        Raises:
            ArtifactsConfigError: If the per-type config file exists but is malformed.
        """
        if not outcome.succeeded:
            logger.debug(f"Build finished as '{outcome.status}'. Nothing to archive.")
            return None

        options = options or ArchiverOptions()
        commit = outcome.commit

        root = self._resolveRoot(options)
        archive_dir = ArtifactArchiver._archiveDir(root, commit)
        overrides = self._loadOverrides(commit.working_tree, options)

        entries = tuple(
            self._resolveEntry(spec, overrides, commit.working_tree, archive_dir)
            for spec in self._artifact_types
        )

        return ArchivePlan(
            root=root, archive_dir=archive_dir, overrides=overrides, entries=entries
        )

    def _resolveRoot(self, options: ArchiverOptions) -> Path:
        """
        Select the archive root.

        Args:
            options (ArchiverOptions): Options of the project.

        Returns:
            Path: The configured root if it exists, the default root otherwise.
        """
        if options.artifact_root is None:
            return self._default_root

        if not self._fs.exists(options.artifact_root):
            logger.warning(
                f"WARNING: Configured artifact_root: {options.artifact_root} does not exist. "
                f"Using default: {self._default_root}"
            )
            return self._default_root

        return options.artifact_root

    def _loadOverrides(
        self, working_tree: Path, options: ArchiverOptions
    ) -> ArtifactOverrides:
        """
        Load the per-type overrides of the project.

        Args:
            working_tree (Path): Working tree the build ran in.
            options (ArchiverOptions): Options of the project.

        Returns:
            ArtifactOverrides: Overrides from the config file, or empty overrides
                if no config file is configured or it does not exist.

        Raises:
            ArtifactsConfigError: If the config file exists but is malformed.
        """
        if options.config_path is None:
            return ArtifactOverrides.empty()

        config_file = working_tree / options.config_path
        if not self._fs.exists(config_file):
            logger.warning(
                f"WARNING: Configured yaml file: {config_file} does not exist! "
                "Using default configuration."
            )
            return ArtifactOverrides.empty()

        return ArtifactOverrides.fromFile(config_file)

    def _resolveEntry(
        self,
        spec: ArtifactTypeSpec,
        overrides: ArtifactOverrides,
        working_tree: Path,
        archive_dir: Path,
    ) -> ArchiveEntry:
        """
        Resolve the source directory of a single artifact type.

        Args:
            spec (ArtifactTypeSpec): The artifact type.
            overrides (ArtifactOverrides): Per-type overrides of the project.
            working_tree (Path): Working tree the build ran in.
            archive_dir (Path): Archive directory of the commit.

        Returns:
            ArchiveEntry: The resolved entry.
        """
        override = overrides.get(spec.name)
        if override.disabled:
            return ArchiveEntry(
                name=spec.name,
                source=None,
                destination=archive_dir,
                skipped=SkipReason.DISABLED,
            )

        source = working_tree / (override.output_dir or spec.default_dir)
        return ArchiveEntry(
            name=spec.name,
            source=source,
            destination=archive_dir,
            skipped=None if self._fs.exists(source) else SkipReason.MISSING,
        )

    @staticmethod
    def _archiveDir(root: Path, commit: Commit) -> Path:
        """
        Archive directory of a commit.

        Args:
            root (Path): The archive root.
            commit (Commit): The built commit.

        Returns:
            Path: `<root>/<project name>/<short identifier>`.
        """
        return root / commit.project.name / commit.short_identifier
