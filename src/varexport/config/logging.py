# topmark:header:start
#
#   project      : VarExport
#   file         : logging.py
#   file_relpath : src/varexport/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for VarExport.

Adds a ``TRACE`` level below ``DEBUG`` (used for per-value recursion
messages), a logger class exposing `VarExportLogger.trace`, and a coloured
formatter. Log records go to stderr: stdout carries the generated source.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "VAREXPORT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first
LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class VarExportLogger(logging.Logger):
    """Logger with a `trace` method for the ``TRACE`` level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at ``TRACE`` level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(VarExportLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter colouring each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colour it by level."""
        message = super().format(record)
        for threshold, paint in LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``VAREXPORT_LOG_LEVEL``, or None.

    Accepts level names (case-insensitive, e.g. ``trace``) and numbers. An
    unset or unknown value gives None.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stderr handler on the root logger.

    Args:
        level (int | None): Root level; when None, ``VAREXPORT_LOG_LEVEL`` is
            consulted, then ``CRITICAL``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> VarExportLogger:
    """Return the `VarExportLogger` called ``name``."""
    return cast("VarExportLogger", logging.getLogger(name))
