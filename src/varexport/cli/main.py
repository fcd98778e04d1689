# topmark:header:start
#
#   project      : VarExport
#   file         : main.py
#   file_relpath : src/varexport/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the VarExport CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

from typing import Any

import click

from varexport.cli.color import ColorMode, resolve_color_mode
from varexport.cli.commands.dump_config import dump_config_command
from varexport.cli.commands.export import export_command
from varexport.cli.commands.version import version_command
from varexport.cli.console import ClickConsole
from varexport.cli.errors import VarExportUnexpectedError
from varexport.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from varexport.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    ``-v``/``-q`` win over ``VAREXPORT_LOG_LEVEL``; without either, logging
    stays at CRITICAL.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level = resolve_verbosity(verbose, quiet) if (verbose or quiet) else resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


class VarExportGroup(click.Group):
    """Click group turning unhandled exceptions into `UNEXPECTED_ERROR` (255)."""

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group, wrapping errors Click does not handle itself."""
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort, EOFError):
            raise
        except Exception as exc:
            logger.debug("Unhandled error in command", exc_info=True)
            raise VarExportUnexpectedError(
                f"Unexpected error: {type(exc).__name__}: {exc}"
            ) from exc


@click.group(
    cls=VarExportGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="VarExport: print Python source that rebuilds a value.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the VarExport CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'varexport export module:NAME' to export a value.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

cli.add_command(export_command)

if __name__ == "__main__":
    cli()
