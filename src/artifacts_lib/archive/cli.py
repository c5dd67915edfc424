# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from artifacts_lib.core.config import CFG
from artifacts_lib.core.error import ArtifactsError
from artifacts_lib.core.logger import get_logger
from artifacts_lib.properties.build import BuildOutcome, BuildStatus, Commit, Project

from .archiver import ArtifactArchiver
from .options import ArchiverOptions
from .presenter import PlanPresenter

logger = get_logger(__name__)


@click.command(
    short_help="Archive the artifacts of a finished build.",
    help=f"""Move the artifacts of a finished build into the public archive.

The output directories of all registered artifact types found in WORKING_TREE are moved
into `<root>/<project>/<short commit>`. If WORKING_TREE is not given, the working tree
of the project inside the configured export directory is used.
Nothing is archived unless the build succeeded.

Use `{CFG.binary_name} archive --dry-run` to only print where the artifacts would go.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument("working_tree", type=click.Path(path_type=Path), required=False)
@click.option("--project", "project_name", required=True, help="Name of the project.")
@click.option(
    "--uri", default="", help="URI of the project's repository.", show_default=False
)
@click.option("--branch", default="master", help="Built branch.", show_default=True)
@click.option("--commit", "identifier", required=True, help="Built commit.")
@click.option(
    "--status",
    type=click.Choice([str(s) for s in BuildStatus], case_sensitive=False),
    default=str(BuildStatus.SUCCEEDED),
    show_default=True,
    help="Final status of the build.",
)
@click.option(
    "--artifact-root",
    default=None,
    help="Archive root overriding the default one. Must exist.",
)
@click.option(
    "--config-yaml",
    default=None,
    help="Per-type config file, relative to the working tree.",
)
@click.option(
    "--dry-run", is_flag=True, help="Print the archive plan without moving anything."
)
def archive(
    working_tree: Path | None,
    project_name: str,
    uri: str,
    branch: str,
    identifier: str,
    status: str,
    artifact_root: str | None,
    config_yaml: str | None,
    dry_run: bool,
) -> NoReturn:
    """
    Archive the artifacts of a finished build.
    """
    try:
        project = Project(name=project_name, uri=uri or project_name, branch=branch)
        outcome = BuildOutcome(
            status=BuildStatus.fromStr(status),
            commit=Commit(
                identifier=identifier,
                project=project,
                working_tree=_resolve_working_tree(project, working_tree),
            ),
        )
        options = ArchiverOptions.fromDict(
            {"artifact_root": artifact_root, "config_yaml": config_yaml}
        )

        archiver = ArtifactArchiver.fromConfig(CFG)
        if dry_run:
            plan = archiver.plan(outcome, options)
        else:
            plan = archiver.deliver(outcome, options)

        if plan is None:
            logger.info("Build did not succeed. Nothing to archive.")
        elif dry_run:
            Console().print(PlanPresenter(plan).createPlanPanel())
        else:
            moved = len(plan.moves)
            logger.info(
                f"Archived {moved} artifact type{'s' if moved != 1 else ''} into '{plan.archive_dir}'."
            )
        sys.exit(0)
    except ArtifactsError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def _resolve_working_tree(project: Project, working_tree: Path | None) -> Path:
    """
    Determine the working tree of the build.

    Args:
        project (Project): The built project.
        working_tree (Path | None): Explicitly provided working tree.

    Returns:
        Path: Absolute path to the working tree.

    Raises:
        ArtifactsError: If the working tree does not exist.
    """
    if working_tree is None:
        working_tree = project.workingTree(Path(CFG.paths.export_directory))

    working_tree = working_tree.resolve()
    if not working_tree.is_dir():
        raise ArtifactsError(f"Working tree '{working_tree}' does not exist.")

    return working_tree
