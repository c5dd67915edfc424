# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

import pytest

from artifacts_lib.archive.options import ArchiverOptions


def test_defaults():
    options = ArchiverOptions()

    assert options.artifact_root is None
    assert options.config_path is None


def test_from_dict_empty():
    assert ArchiverOptions.fromDict({}) == ArchiverOptions()


def test_from_dict_notifier_keys():
    options = ArchiverOptions.fromDict(
        {"artifact_root": "/var/www/artifacts", "config_yaml": "config/artifacts.yml"}
    )

    assert options.artifact_root == Path("/var/www/artifacts")
    assert options.config_path == Path("config/artifacts.yml")


def test_from_dict_config_path_alias():
    options = ArchiverOptions.fromDict({"config_path": "config/artifacts.yml"})

    assert options.config_path == Path("config/artifacts.yml")


def test_from_dict_config_yaml_takes_precedence():
    options = ArchiverOptions.fromDict(
        {"config_yaml": "a.yml", "config_path": "b.yml"}
    )

    assert options.config_path == Path("a.yml")


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_from_dict_blank_values_are_unset(blank):
    options = ArchiverOptions.fromDict({"artifact_root": blank, "config_yaml": blank})

    assert options == ArchiverOptions()


def test_from_dict_strips_whitespace():
    options = ArchiverOptions.fromDict({"artifact_root": " /var/www/artifacts "})

    assert options.artifact_root == Path("/var/www/artifacts")
