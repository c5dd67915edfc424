# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from click.testing import CliRunner

from artifacts_lib.fields.cli import fields


def test_fields_lists_form_schema():
    result = CliRunner().invoke(fields, [])

    assert result.exit_code == 0
    assert "artifact_root" in result.output
    assert "config_yaml" in result.output
    assert "Artifact Root" in result.output
