# topmark:header:start
#
#   project      : VarExport
#   file         : dump_config.py
#   file_relpath : src/varexport/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VarExport `dump-config` command.

Emits the effective configuration as TOML after applying defaults, the config
file and any CLI overrides. The output is wrapped between ``# === BEGIN ===``
and ``# === END ===`` markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from varexport.cli.config_resolver import resolve_config_from_click
from varexport.cli.options import common_config_options, common_export_formatting_options
from varexport.config.io import to_toml

if TYPE_CHECKING:
    from varexport.cli.console import ClickConsole


@click.command(
    name="dump-config",
    help="Dump the effective VarExport configuration as TOML.",
)
@common_config_options
@common_export_formatting_options
@click.pass_context
def dump_config_command(
    ctx: click.Context,
    config_file: str | None,
    no_config: bool,
    **formatting: Any,
) -> None:
    """Dump the merged configuration as TOML.

    Args:
        ctx (click.Context): Click context (holds the console).
        config_file (str | None): Explicit config file.
        no_config (bool): Disable config discovery.
        **formatting (Any): Formatting options.
    """
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config = resolve_config_from_click(
        ctx, formatting, config_file=config_file, no_config=no_config
    )
    console.print("# === BEGIN ===")
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
    console.print("# === END ===")
