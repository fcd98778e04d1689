# topmark:header:start
#
#   project      : VarExport
#   file         : io.py
#   file_relpath : src/varexport/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input loading for the `export` command.

The value to export comes from one of three sources:

- a ``module:attribute`` reference, imported from the current environment;
- a JSON document (``--json FILE``);
- a TOML document (``--toml FILE``).

For documents, ``-`` reads STDIN.
"""

from __future__ import annotations

import importlib
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError

from varexport.cli.errors import (
    VarExportDataError,
    VarExportFileNotFoundError,
    VarExportIOError,
    VarExportUsageError,
)
from varexport.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


class DocumentFormat(str, Enum):
    """Supported input document formats."""

    JSON = "json"
    TOML = "toml"


def resolve_reference(reference: str) -> Any:
    """Import the object named by ``reference``.

    Args:
        reference (str): ``package.module:attribute`` where ``attribute`` may be
            dotted (``module:Class.CONSTANT``).

    Returns:
        Any: The referenced object.

    Raises:
        VarExportUsageError: If the reference is malformed, or the module or
            attribute cannot be found.
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise VarExportUsageError(
            f"Invalid reference '{reference}': expected 'module:attribute'."
        )

    cwd = str(Path.cwd())
    if cwd not in sys.path:
        # Same lookup rules as `python -c`: modules of the working directory are importable
        sys.path.insert(0, cwd)

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise VarExportUsageError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise VarExportUsageError(
                f"Module '{module_name}' has no attribute '{attribute}'."
            ) from exc
    logger.debug("Resolved %s to a %s", reference, type(target).__name__)
    return target


def read_text(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        VarExportFileNotFoundError: If the file does not exist.
        VarExportDataError: If the content is not valid UTF-8.
        VarExportIOError: If the file cannot be read.
    """
    name = "<stdin>" if source == STDIN_SENTINEL else source
    try:
        if source == STDIN_SENTINEL:
            return sys.stdin.read()
        path = Path(source)
        if not path.exists():
            raise VarExportFileNotFoundError(f"No such file: {source}")
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise VarExportDataError(f"{name} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise VarExportIOError(f"Cannot read {name}: {exc}") from exc


def load_document(source: str, fmt: DocumentFormat) -> Any:
    """Decode a JSON or TOML document into plain Python values.

    TOML documents are unwrapped from tomlkit's container types, so the
    exported code only involves builtins.

    Args:
        source (str): File path, or ``-`` for STDIN.
        fmt (DocumentFormat): Document format.

    Returns:
        Any: The decoded value.

    Raises:
        VarExportDataError: If the document cannot be decoded.
    """
    text = read_text(source)
    name = "<stdin>" if source == STDIN_SENTINEL else source
    if fmt is DocumentFormat.JSON:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise VarExportDataError(f"Invalid JSON in {name}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except ParseError as exc:
        raise VarExportDataError(f"Invalid TOML in {name}: {exc}") from exc
