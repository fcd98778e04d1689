# topmark:header:start
#
#   project      : VarExport
#   file         : version.py
#   file_relpath : src/varexport/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VarExport `version` command.

Prints the current VarExport version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from varexport.constants import VAREXPORT_VERSION

if TYPE_CHECKING:
    from varexport.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of VarExport.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of VarExport."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(VAREXPORT_VERSION)
