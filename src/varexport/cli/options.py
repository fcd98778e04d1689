# topmark:header:start
#
#   project      : VarExport
#   file         : options.py
#   file_relpath : src/varexport/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for VarExport commands.

Formatting options mirror the `ExportConfig` fields one to one. They are
tri-state: an option the user did not type never overrides the value coming
from a config file (see `collect_overrides`).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from varexport.cli.cli_types import EnumChoiceParam
from varexport.cli.color import ColorMode
from varexport.cli.errors import VarExportUsageError
from varexport.config.keys import Toml
from varexport.config.logging import TRACE_LEVEL, get_logger
from varexport.config.types import ClassReferenceStyle

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Click parameter names carrying `ExportConfig` overrides
FORMATTING_PARAMS: tuple[str, ...] = (
    Toml.KEY_ADD_TYPE_HINTS,
    Toml.KEY_INDENT,
    Toml.KEY_INDENT_LEVEL,
    Toml.KEY_INLINE_SCALAR_LISTS,
    Toml.KEY_TRAILING_COMMA,
    Toml.KEY_CLASS_REFERENCE,
    Toml.KEY_USE_STATE_PROTOCOL,
    Toml.KEY_SKIP_DYNAMIC_ATTRIBUTES,
    Toml.KEY_PUBLIC_ONLY,
    Toml.KEY_ASSIGN_TO,
)

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        VarExportUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise VarExportUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (repeat up to three times).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--config/-c`` and ``--no-config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not look for varexport.toml / pyproject.toml (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_file",
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        default=None,
        help="Config file to load instead of the discovered one.",
    )(f)
    return f


def common_export_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the export formatting options to a Click command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--type-hints/--no-type-hints",
        Toml.KEY_ADD_TYPE_HINTS,
        default=False,
        help="Emit a '# type:' comment before each object allocation.",
    )(f)
    f = click.option(
        "--indent",
        Toml.KEY_INDENT,
        type=click.IntRange(min=1),
        default=None,
        metavar="SPACES",
        help="Number of spaces per indentation level (default: 4).",
    )(f)
    f = click.option(
        "--indent-level",
        Toml.KEY_INDENT_LEVEL,
        type=click.IntRange(min=0),
        default=None,
        metavar="N",
        help="Extra indentation applied to every line but the first.",
    )(f)
    f = click.option(
        "--inline-scalar-lists/--no-inline-scalar-lists",
        Toml.KEY_INLINE_SCALAR_LISTS,
        default=False,
        help="Keep lists and tuples of scalars on a single line.",
    )(f)
    f = click.option(
        "--trailing-comma/--no-trailing-comma",
        Toml.KEY_TRAILING_COMMA,
        default=True,
        help="Add a comma after the last element of multi-line displays.",
    )(f)
    f = click.option(
        "--class-reference",
        Toml.KEY_CLASS_REFERENCE,
        type=EnumChoiceParam(ClassReferenceStyle),
        default=None,
        help=f"How classes are named ({', '.join(s.value for s in ClassReferenceStyle)}).",
    )(f)
    f = click.option(
        "--state-protocol/--no-state-protocol",
        Toml.KEY_USE_STATE_PROTOCOL,
        default=True,
        help="Rebuild objects defining __setstate__ through it.",
    )(f)
    f = click.option(
        "--skip-dynamic-attributes/--keep-dynamic-attributes",
        Toml.KEY_SKIP_DYNAMIC_ATTRIBUTES,
        default=False,
        help="Only rebuild attributes declared by __slots__ or class annotations.",
    )(f)
    f = click.option(
        "--public-only/--all-attributes",
        Toml.KEY_PUBLIC_ONLY,
        default=False,
        help="Skip attributes whose name starts with an underscore.",
    )(f)
    f = click.option(
        "--assign-to",
        Toml.KEY_ASSIGN_TO,
        default=None,
        metavar="NAME",
        help="Emit 'NAME = <expression>' instead of a bare expression.",
    )(f)
    return f


def collect_overrides(
    ctx: click.Context,
    params: dict[str, Any],
    names: Iterable[str] = FORMATTING_PARAMS,
) -> dict[str, Any]:
    """Return the formatting options the user actually passed.

    Values coming from Click defaults are dropped so they do not shadow the
    config file.

    Args:
        ctx (click.Context): Current Click context.
        params (dict[str, Any]): Parsed parameter values, keyed by name.
        names (Iterable[str]): Parameter names to consider.

    Returns:
        dict[str, Any]: Overrides suitable for `MutableExportConfig.apply_overrides`.
    """
    overrides: dict[str, Any] = {}
    for name in names:
        source = ctx.get_parameter_source(name)
        if source is None or source is ParameterSource.DEFAULT:
            continue
        overrides[name] = params.get(name)
    logger.debug("CLI overrides: %s", overrides)
    return overrides
