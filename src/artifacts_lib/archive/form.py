# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Declarative description of the archiver's configurable fields.

Configuration UIs render these descriptors; the archiver reads the values
back through `ArchiverOptions.fromDict`.
"""

from dataclasses import dataclass

# Name under which the archiver's settings are stored by the notifier dispatch.
NOTIFIER_NAME = "Artifacts"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    A single configurable field of the archiver.
    """

    # Key of the value in the stored notifier configuration
    name: str

    # Human-readable label
    label: str

    # Kind of input
    kind: str = "text"

    @property
    def html_id(self) -> str:
        return f"{NOTIFIER_NAME.lower()}_{self.name}"

    @property
    def input_name(self) -> str:
        return f"notifiers[{NOTIFIER_NAME}][{self.name}]"


_FIELDS = (
    FieldDescriptor(name="artifact_root", label="Artifact Root"),
    FieldDescriptor(name="config_yaml", label="Config YAML"),
)


def form_schema() -> list[FieldDescriptor]:
    """Return the configurable fields of the archiver in display order."""
    return list(_FIELDS)
