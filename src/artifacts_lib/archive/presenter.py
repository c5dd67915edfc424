# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from artifacts_lib.core.config import CFG

from .form import FieldDescriptor
from .plan import ArchivePlan


class PlanPresenter:
    """
    Presents a resolved archive plan.
    """

    def __init__(self, plan: ArchivePlan):
        """
        Initialize the presenter with a plan.

        Args:
            plan (ArchivePlan): The plan to present.
        """
        self._plan = plan

    def createPlanPanel(self) -> Group:
        """
        Create a Rich panel describing the plan.

        Returns:
            Group: Rich Group containing the archive directory and per-type table.
        """
        header = Text()
        header.append("Archive directory: ", style=CFG.presenter.key_style)
        header.append(str(self._plan.archive_dir), style=CFG.presenter.value_style)
        if self._plan.overrides.source:
            header.append("\nConfiguration: ", style=CFG.presenter.key_style)
            header.append(
                str(self._plan.overrides.source), style=CFG.presenter.value_style
            )

        panel = Panel(
            Group(header, Text(""), self._createEntriesTable()),
            title=Text(
                "ARCHIVE PLAN", style=CFG.presenter.title_style, justify="center"
            ),
            border_style=CFG.presenter.border_style,
            padding=(1, 1),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    def _createEntriesTable(self) -> Table:
        """
        Construct a table with one row per artifact type.

        Returns:
            Table: A Rich Table with the type, its source and its fate.
        """
        table = Table(show_header=True, box=None, padding=(0, 1))

        for header in ("Type", "Source", "Action"):
            table.add_column(
                header=Text(header, justify="center", style=CFG.presenter.headers_style),
                justify="left",
            )

        for entry in self._plan.entries:
            if entry.archived:
                action = Text("move", style=CFG.presenter.archived_style)
            else:
                action = Text(f"skip ({entry.skipped})", style=CFG.presenter.skipped_style)

            table.add_row(
                Text(entry.name, style=CFG.presenter.value_style),
                Text(str(entry.source or "-"), style=CFG.presenter.value_style),
                action,
            )

        return table


class FieldsPresenter:
    """
    Presents the configurable fields of the archiver.
    """

    def __init__(self, fields: list[FieldDescriptor]):
        self._fields = fields

    def createFieldsTable(self) -> Table:
        """
        Construct a table describing all fields.

        Returns:
            Table: A Rich Table with one row per field.
        """
        table = Table(show_header=True, box=None, padding=(0, 1))

        for header in ("Name", "Label", "Kind", "Input"):
            table.add_column(
                header=Text(header, justify="center", style=CFG.presenter.headers_style),
                justify="left",
            )

        for field in self._fields:
            table.add_row(
                Text(field.name, style=CFG.presenter.key_style),
                Text(field.label, style=CFG.presenter.value_style),
                Text(field.kind, style=CFG.presenter.value_style),
                Text(field.input_name, style=CFG.presenter.notes_style),
            )

        return table
