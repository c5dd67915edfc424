# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from artifacts_lib.archive.cli import archive
from artifacts_lib.artifacts import __version__, cli
from artifacts_lib.core.config import CFG
from artifacts_lib.core.error import ArtifactsConfigError


@pytest.fixture
def tree(tmp_path):
    working_tree = tmp_path / "builds" / "foo-master"
    (working_tree / "coverage").mkdir(parents=True)
    (working_tree / "coverage" / "index.html").write_text("coverage")
    root = tmp_path / "public"
    root.mkdir()
    return working_tree, root


def test_archive_moves_artifacts(tree):
    working_tree, root = tree

    result = CliRunner().invoke(
        archive,
        [
            str(working_tree),
            "--project",
            "foo",
            "--commit",
            "abc1234def",
            "--artifact-root",
            str(root),
        ],
    )

    assert result.exit_code == 0
    assert (root / "foo" / "abc1234" / "coverage" / "index.html").exists()
    assert not (working_tree / "coverage").exists()


def test_archive_failed_build_does_nothing(tree):
    working_tree, root = tree

    result = CliRunner().invoke(
        archive,
        [
            str(working_tree),
            "--project",
            "foo",
            "--commit",
            "abc1234",
            "--artifact-root",
            str(root),
            "--status",
            "failed",
        ],
    )

    assert result.exit_code == 0
    assert (working_tree / "coverage").exists()
    assert not (root / "foo").exists()


def test_archive_dry_run_prints_plan(tree):
    working_tree, root = tree

    result = CliRunner().invoke(
        archive,
        [
            str(working_tree),
            "--project",
            "foo",
            "--commit",
            "abc1234",
            "--artifact-root",
            str(root),
            "--dry-run",
        ],
    )

    assert result.exit_code == 0
    assert "ARCHIVE PLAN" in result.output
    assert "rcov" in result.output
    assert (working_tree / "coverage").exists()
    assert not (root / "foo").exists()


def test_archive_uses_export_directory(tree, monkeypatch):
    working_tree, root = tree
    monkeypatch.setattr(CFG.paths, "export_directory", str(working_tree.parent))

    result = CliRunner().invoke(
        archive,
        [
            "--project",
            "foo",
            "--uri",
            "git://example.org/foo.git",
            "--commit",
            "abc1234",
            "--artifact-root",
            str(root),
        ],
    )

    assert result.exit_code == 0
    assert (root / "foo" / "abc1234" / "coverage").exists()


@patch("artifacts_lib.archive.cli.logger")
def test_archive_missing_working_tree(mock_logger, tmp_path):
    result = CliRunner().invoke(
        archive,
        [str(tmp_path / "missing"), "--project", "foo", "--commit", "abc1234"],
    )

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()
    assert "does not exist" in str(mock_logger.error.call_args.args[0])


@patch("artifacts_lib.archive.cli.logger")
def test_archive_malformed_configuration(mock_logger, tree):
    working_tree, root = tree
    (working_tree / "artifacts.yml").write_text("rcov: [output_dir\n")

    result = CliRunner().invoke(
        archive,
        [
            str(working_tree),
            "--project",
            "foo",
            "--commit",
            "abc1234",
            "--artifact-root",
            str(root),
            "--config-yaml",
            "artifacts.yml",
        ],
    )

    assert result.exit_code == CFG.exit_codes.default
    assert isinstance(mock_logger.error.call_args.args[0], ArtifactsConfigError)
    assert (working_tree / "coverage").exists()


@patch("artifacts_lib.archive.cli.logger")
@patch("artifacts_lib.archive.cli.ArtifactArchiver.fromConfig")
def test_archive_unexpected_error(mock_from_config, mock_logger, tree):
    working_tree, _ = tree
    mock_archiver = MagicMock()
    mock_archiver.deliver.side_effect = PermissionError("denied")
    mock_from_config.return_value = mock_archiver

    result = CliRunner().invoke(
        archive, [str(working_tree), "--project", "foo", "--commit", "abc1234"]
    )

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once()


def test_archive_requires_project_and_commit(tree):
    working_tree, _ = tree

    result = CliRunner().invoke(archive, [str(working_tree)])

    assert result.exit_code == 2


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_without_command_prints_help():
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 0
    assert "archive" in result.output
    assert "fields" in result.output


def test_cli_dispatches_archive(tree):
    working_tree, root = tree

    result = CliRunner().invoke(
        cli,
        [
            "archive",
            str(working_tree),
            "--project",
            "foo",
            "--commit",
            "abc1234",
            "--artifact-root",
            str(root),
        ],
    )

    assert result.exit_code == 0
    assert (root / "foo" / "abc1234" / "coverage").exists()
