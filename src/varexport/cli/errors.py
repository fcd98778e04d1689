# topmark:header:start
#
#   project      : VarExport
#   file         : errors.py
#   file_relpath : src/varexport/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the VarExport CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from varexport.cli.exit_codes import ExitCode


class VarExportCliError(click.ClickException):
    """Base class for all VarExport CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class VarExportUsageError(VarExportCliError):
    """Error for command-line invocation errors (invalid flags/args/references)."""

    exit_code = ExitCode.USAGE_ERROR


class VarExportDataError(VarExportCliError):
    """Error for input documents that cannot be decoded (bad JSON/TOML)."""

    exit_code = ExitCode.DATA_ERROR


class VarExportFileNotFoundError(VarExportCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class VarExportUnsupportedValueError(VarExportCliError):
    """Error for values that cannot be expressed as source (opaque types, cycles)."""

    exit_code = ExitCode.UNSUPPORTED_VALUE


class VarExportIOError(VarExportCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class VarExportConfigError(VarExportCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class VarExportUnexpectedError(VarExportCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
