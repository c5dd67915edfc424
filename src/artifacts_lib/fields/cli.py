# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from artifacts_lib.archive.form import form_schema
from artifacts_lib.archive.presenter import FieldsPresenter


@click.command(
    short_help="Display the configurable fields of the archiver.",
    help="Display the fields through which the archiver is configured for a project.",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
def fields() -> NoReturn:
    console = Console(record=False, markup=False)
    console.print(FieldsPresenter(form_schema()).createFieldsTable())
    sys.exit(0)
