# topmark:header:start
#
#   project      : VarExport
#   file         : export.py
#   file_relpath : src/varexport/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VarExport `export` command.

Prints Python source that rebuilds a value. The value is either imported
(``varexport export package.module:NAME``) or decoded from a JSON/TOML
document (``--json FILE`` / ``--toml FILE``, ``-`` for STDIN).

Exit codes:
    * 0: the source was written.
    * 64: invalid invocation or unresolvable reference.
    * 65/66/74: the input document is invalid, missing or unreadable.
    * 69: the value holds something that cannot be exported.
    * 78: invalid configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from varexport.api import export
from varexport.cli.config_resolver import resolve_config_from_click
from varexport.cli.errors import (
    VarExportIOError,
    VarExportUnsupportedValueError,
    VarExportUsageError,
)
from varexport.cli.io import DocumentFormat, load_document, resolve_reference
from varexport.cli.options import common_config_options, common_export_formatting_options
from varexport.config.logging import get_logger
from varexport.errors import ExportError

if TYPE_CHECKING:
    from varexport.cli.console import ClickConsole

logger = get_logger(__name__)


@click.command(
    name="export",
    help=(
        "Print Python source that rebuilds a value. REFERENCE names an importable "
        "object as 'module:attribute'; alternatively use --json/--toml to export a document."
    ),
)
@click.argument("reference", required=False)
@click.option(
    "--json",
    "json_source",
    metavar="FILE",
    default=None,
    help="Export the content of a JSON document ('-' reads STDIN).",
)
@click.option(
    "--toml",
    "toml_source",
    metavar="FILE",
    default=None,
    help="Export the content of a TOML document ('-' reads STDIN).",
)
@click.option(
    "--output",
    "-o",
    "output",
    metavar="FILE",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the source to FILE instead of stdout.",
)
@common_config_options
@common_export_formatting_options
@click.pass_context
def export_command(
    ctx: click.Context,
    reference: str | None,
    json_source: str | None,
    toml_source: str | None,
    output: str | None,
    config_file: str | None,
    no_config: bool,
    **formatting: Any,
) -> None:
    """Export one value as Python source.

    Args:
        ctx (click.Context): Click context (holds the console).
        reference (str | None): ``module:attribute`` reference.
        json_source (str | None): JSON document path.
        toml_source (str | None): TOML document path.
        output (str | None): Output path; stdout when None.
        config_file (str | None): Explicit config file.
        no_config (bool): Disable config discovery.
        **formatting (Any): Formatting options (see `common_export_formatting_options`).
    """
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    sources = [s for s in (reference, json_source, toml_source) if s is not None]
    if len(sources) != 1:
        raise VarExportUsageError(
            "Pass exactly one of REFERENCE, --json FILE or --toml FILE."
        )

    config = resolve_config_from_click(
        ctx, formatting, config_file=config_file, no_config=no_config
    )

    if json_source is not None:
        value = load_document(json_source, DocumentFormat.JSON)
    elif toml_source is not None:
        value = load_document(toml_source, DocumentFormat.TOML)
    else:
        value = resolve_reference(sources[0])

    try:
        source = export(value, config)
    except ExportError as exc:
        raise VarExportUnsupportedValueError(str(exc)) from exc

    if output is None:
        console.print(source)
        return

    try:
        Path(output).write_text(source + "\n", encoding="utf-8")
    except OSError as exc:
        raise VarExportIOError(f"Cannot write {output}: {exc}") from exc
    logger.info("Wrote %s", output)
