# topmark:header:start
#
#   project      : VarExport
#   file         : config_resolver.py
#   file_relpath : src/varexport/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective `ExportConfig` for a CLI command.

Layering, lowest to highest precedence:
    1. Built-in defaults.
    2. The config file: ``--config FILE``, or the nearest ``varexport.toml`` /
       ``pyproject.toml`` (with a ``[tool.varexport]`` table) above the working
       directory unless ``--no-config`` is given.
    3. Formatting options typed on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from varexport.cli.errors import VarExportConfigError
from varexport.cli.options import collect_overrides
from varexport.config.logging import get_logger
from varexport.config.model import MutableExportConfig
from varexport.errors import ConfigError

if TYPE_CHECKING:
    import click

    from varexport.config.model import ExportConfig

logger = get_logger(__name__)


def resolve_config_from_click(
    ctx: click.Context,
    params: dict[str, Any],
    *,
    config_file: str | None,
    no_config: bool,
) -> ExportConfig:
    """Build the frozen configuration for the current command.

    Args:
        ctx (click.Context): Current Click context.
        params (dict[str, Any]): Parsed command parameters.
        config_file (str | None): Explicit ``--config`` path.
        no_config (bool): Whether config discovery is disabled.

    Returns:
        ExportConfig: The effective configuration.

    Raises:
        VarExportConfigError: If a config source is unreadable or invalid.
    """
    overrides = collect_overrides(ctx, params)
    try:
        draft = MutableExportConfig.load_merged(
            config_file=Path(config_file) if config_file else None,
            discover_from=None if no_config else Path.cwd(),
            overrides=overrides,
        )
        config = draft.freeze()
    except ConfigError as exc:
        raise VarExportConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config
