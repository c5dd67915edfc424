# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Registered artifact types.

Every artifact type is a row of a table: a name (the key used in per-type
config files) and the default output directory relative to the working tree.
Adding a type means adding a row to `artifact_types` in the artifacts config.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from artifacts_lib.core.config import ArtifactTypeEntry, default_artifact_types


@dataclass(frozen=True)
class ArtifactTypeSpec:
    """
    A registered artifact type with its compiled-in output directory.
    """

    name: str
    default_dir: Path

    @classmethod
    def fromEntry(cls, entry: ArtifactTypeEntry) -> Self:
        return cls(name=entry.name, default_dir=Path(entry.default_dir))


def load_artifact_types(
    entries: Iterable[ArtifactTypeEntry],
) -> tuple[ArtifactTypeSpec, ...]:
    """
    Convert configured table rows into artifact type specs, preserving order.

    Args:
        entries (Iterable[ArtifactTypeEntry]): Rows of the artifact type table.

    Returns:
        tuple[ArtifactTypeSpec, ...]: Artifact types in iteration order.

    Raises:
        ValueError: If two rows share a name.
    """
    specs = tuple(ArtifactTypeSpec.fromEntry(entry) for entry in entries)

    names = [spec.name for spec in specs]
    if len(names) != len(set(names)):
        raise ValueError(f"Artifact type names must be unique: {names}.")

    return specs


# Artifact types known without any configuration.
DEFAULT_ARTIFACT_TYPES: tuple[ArtifactTypeSpec, ...] = load_artifact_types(
    default_artifact_types()
)
