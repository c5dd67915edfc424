# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self


@dataclass(frozen=True)
class ArchiverOptions:
    """
    Per-project options of the archiver.
    """

    # Absolute path overriding the default archive root.
    artifact_root: Path | None = None

    # Path to a per-type config file, relative to the working tree.
    config_path: Path | None = None

    @classmethod
    def fromDict(cls, data: Mapping[str, Any]) -> Self:
        """
        Build options from the notifier's stored configuration.

        Accepts the `artifact_root` and `config_yaml` keys (`config_path`
        is accepted as an alias). Missing and blank values are unset.

        Args:
            data (Mapping[str, Any]): Stored notifier configuration.

        Returns:
            ArchiverOptions: The parsed options.
        """
        artifact_root = _optional_path(data.get("artifact_root"))
        config_path = _optional_path(data.get("config_yaml", data.get("config_path")))

        return cls(artifact_root=artifact_root, config_path=config_path)


def _optional_path(value: Any) -> Path | None:
    if value is None:
        return None

    value = str(value).strip()
    return Path(value) if value else None
