# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Per-type overrides of artifact output directories.

A project may keep a YAML file in its repository that adjusts the archiving
of individual artifact types:

    rcov:
      output_dir: rcov
      disabled: true
    metric_fu:
      output_dir: tmp/metric_fu

`ArtifactOverrides.empty()` stands for "no config file"; an existing file
that parses to nothing yields an equally empty, but loaded, set of overrides.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

import yaml

from artifacts_lib.core.common import load_yaml_loader
from artifacts_lib.core.error import ArtifactsConfigError
from artifacts_lib.core.logger import get_logger

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()


@dataclass(frozen=True)
class ArtifactTypeOverride:
    """
    Override of a single artifact type.
    """

    # Output directory relative to the working tree; None keeps the default.
    output_dir: Path | None = None

    # Do not archive this artifact type at all.
    disabled: bool = False

    @classmethod
    def fromDict(cls, name: str, data: Mapping[str, Any] | None) -> Self:
        """
        Build an override from one entry of the config file.

        Args:
            name (str): Name of the artifact type (for error messages).
            data (Mapping[str, Any] | None): The entry; None is an empty entry.

        Returns:
            ArtifactTypeOverride: The parsed override.

        Raises:
            ArtifactsConfigError: If the entry has an invalid structure.
        """
        if data is None:
            return cls()

        if not isinstance(data, Mapping):
            raise ArtifactsConfigError(
                f"Configuration of artifact type '{name}' must be a mapping, got '{data}'."
            )

        output_dir = data.get("output_dir")
        if output_dir is not None and not isinstance(output_dir, str):
            raise ArtifactsConfigError(
                f"Option 'output_dir' of artifact type '{name}' must be a string, got '{output_dir}'."
            )

        disabled = data.get("disabled", False)
        if not isinstance(disabled, bool):
            raise ArtifactsConfigError(
                f"Option 'disabled' of artifact type '{name}' must be a boolean, got '{disabled}'."
            )

        if unknown := set(data) - {"output_dir", "disabled"}:
            logger.debug(f"Ignoring unknown options of '{name}': {sorted(unknown)}.")

        return cls(
            output_dir=Path(output_dir) if output_dir else None,
            disabled=disabled,
        )


@dataclass(frozen=True)
class ArtifactOverrides:
    """
    Overrides of all artifact types, keyed by artifact type name.
    """

    overrides: Mapping[str, ArtifactTypeOverride] = field(
        default_factory=lambda: MappingProxyType({})
    )

    # Path of the file the overrides were loaded from.
    source: Path | None = None

    @classmethod
    def empty(cls) -> Self:
        """Overrides used when no config file is available."""
        return cls()

    @classmethod
    def fromFile(cls, file: Path) -> Self:
        """
        Load overrides from a YAML file.

        Args:
            file (Path): Path to the per-type config file.

        Returns:
            ArtifactOverrides: The loaded overrides.

        Raises:
            ArtifactsConfigError: If the file cannot be read, is not valid YAML,
                or does not have the expected structure.
        """
        logger.debug(f"Loading artifact configuration from '{file}'.")
        try:
            with file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise ArtifactsConfigError(
                f"Could not parse the artifact configuration '{file}': {e}."
            ) from e
        except OSError as e:
            raise ArtifactsConfigError(
                f"Could not read the artifact configuration '{file}': {e}."
            ) from e

        return cls.fromDict(data, source=file)

    @classmethod
    def fromDict(cls, data: Any, source: Path | None = None) -> Self:
        """
        Build overrides from parsed config content.

        Args:
            data (Any): Parsed content; None (an empty document) means no overrides.
            source (Path | None): File the content was read from.

        Returns:
            ArtifactOverrides: The overrides.

        Raises:
            ArtifactsConfigError: If the content is not a mapping of type names to entries.
        """
        if data is None:
            return cls(source=source)

        if not isinstance(data, Mapping):
            raise ArtifactsConfigError(
                f"Artifact configuration '{source}' must be a mapping of artifact types."
            )

        overrides = {
            str(name): ArtifactTypeOverride.fromDict(str(name), entry)
            for name, entry in data.items()
        }
        return cls(overrides=MappingProxyType(overrides), source=source)

    def get(self, name: str) -> ArtifactTypeOverride:
        """
        Return the override of an artifact type or an empty override.

        Args:
            name (str): Name of the artifact type.

        Returns:
            ArtifactTypeOverride: The configured or the default override.
        """
        return self.overrides.get(name, ArtifactTypeOverride())

    def __contains__(self, name: object) -> bool:
        return name in self.overrides

    def __len__(self) -> int:
        return len(self.overrides)
