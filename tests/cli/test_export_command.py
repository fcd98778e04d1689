# topmark:header:start
#
#   project      : VarExport
#   file         : test_export_command.py
#   file_relpath : tests/cli/test_export_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `export` command sources, options and config layering."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import evaluate, make_config, mark_cli
from tests.sample_models import SAMPLE_COLOR, SAMPLE_DATA
from varexport import export

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_export_reference(isolation: Path) -> None:
    """A ``module:attribute`` reference is imported and exported to stdout."""
    result = run_cli(["--no-color", "export", "tests.sample_models:SAMPLE_DATA"])

    assert_SUCCESS(result)
    assert result.output == export(SAMPLE_DATA) + "\n"
    assert evaluate(result.output) == SAMPLE_DATA


@mark_cli
def test_export_dotted_attribute(isolation: Path) -> None:
    result = run_cli(["--no-color", "export", "tests.sample_models:Color.GREEN"])

    assert_SUCCESS(result)
    assert evaluate(result.output) is SAMPLE_COLOR


@mark_cli
def test_export_json_file(isolation: Path) -> None:
    data = {"a": [1, 2.5, None, True], "b": {"c": "d"}}
    (isolation / "data.json").write_text(json.dumps(data), encoding="utf-8")

    result = run_cli(["--no-color", "export", "--json", "data.json"])

    assert_SUCCESS(result)
    assert result.output == export(data) + "\n"


@mark_cli
def test_export_toml_from_stdin(isolation: Path) -> None:
    result = run_cli(
        ["--no-color", "export", "--toml", "-"],
        input_text='title = "x"\n[owner]\nids = [1, 2]\n',
    )

    assert_SUCCESS(result)
    assert evaluate(result.output) == {"title": "x", "owner": {"ids": [1, 2]}}


@mark_cli
def test_formatting_options(isolation: Path) -> None:
    result = run_cli(
        [
            "--no-color",
            "export",
            "--inline-scalar-lists",
            "--no-trailing-comma",
            "--indent",
            "2",
            "--assign-to",
            "data",
            "--json",
            "-",
        ],
        input_text='{"values": [1, 2], "name": "n"}',
    )

    assert_SUCCESS(result)
    assert result.output == "data = {\n  'values': [1, 2],\n  'name': 'n'\n}\n"


@mark_cli
def test_output_file(isolation: Path) -> None:
    target = isolation / "out.py"

    result = run_cli(["--no-color", "export", "--json", "-", "--output", str(target)], input_text="[1]")

    assert_SUCCESS(result)
    assert result.output == ""
    assert target.read_text(encoding="utf-8") == "[\n    1,\n]\n"


@mark_cli
def test_config_file_is_discovered(isolation: Path) -> None:
    (isolation / "varexport.toml").write_text(
        "indent = 2\ntrailing_comma = false\n", encoding="utf-8"
    )

    result = run_cli(["--no-color", "export", "--json", "-"], input_text="[1, 2]")

    assert_SUCCESS(result)
    assert result.output == "[\n  1,\n  2\n]\n"


@mark_cli
def test_command_line_beats_config_file(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text(
        "[tool.varexport]\ntrailing_comma = false\n", encoding="utf-8"
    )

    result = run_cli(
        ["--no-color", "export", "--trailing-comma", "--json", "-"], input_text="[1]"
    )

    assert_SUCCESS(result)
    assert result.output == "[\n    1,\n]\n"


@mark_cli
def test_no_config_ignores_config_file(isolation: Path) -> None:
    (isolation / "varexport.toml").write_text("indent = 2\n", encoding="utf-8")

    result = run_cli(["--no-color", "export", "--no-config", "--json", "-"], input_text="[1]")

    assert_SUCCESS(result)
    assert result.output == "[\n    1,\n]\n"


@mark_cli
def test_explicit_config_file(isolation: Path) -> None:
    config_path = isolation / "custom.toml"
    config_path.write_text('class_reference = "name"\npublic_only = true\n', encoding="utf-8")

    result = run_cli(
        [
            "--no-color",
            "export",
            "--config",
            str(config_path),
            "tests.sample_models:SAMPLE_DATA",
        ]
    )

    assert_SUCCESS(result)
    config = make_config(class_reference="name", public_only=True)
    assert result.output == export(SAMPLE_DATA, config) + "\n"
    assert "(cls := Point)," in result.output
