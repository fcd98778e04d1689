# topmark:header:start
#
#   project      : VarExport
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from varexport.constants import VAREXPORT_VERSION


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == VAREXPORT_VERSION
