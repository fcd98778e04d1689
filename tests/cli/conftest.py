# topmark:header:start
#
#   project      : VarExport
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running VarExport through Click's test runner."""

from __future__ import annotations

import logging
from typing import IO, Any, Sequence

from click.testing import CliRunner, Result

from varexport.cli.exit_codes import ExitCode
from varexport.cli.main import cli


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Combine with the ``isolation`` fixture when the test depends on config
    discovery, so the repository's own files stay out of reach.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command (for ``--json -`` / ``--toml -``).

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "export", "pkg.mod:VALUE"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    # The CLI reconfigures the root logger for the duration of the run
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    try:
        return runner.invoke(cli, argv, input=input_text)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit_code(result: Result, expected: ExitCode) -> None:
    """Assert that the command exited with ``expected``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        expected (ExitCode): Expected exit code.
    """
    assert result.exit_code == expected, result.output
