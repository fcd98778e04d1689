# topmark:header:start
#
#   project      : VarExport
#   file         : io.py
#   file_relpath : src/varexport/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading VarExport configuration from
on-disk TOML files (``varexport.toml`` / ``pyproject.toml``) and for rendering
a configuration table back to TOML text.

Parsing and rendering are done with `tomlkit`; parsed documents are returned
as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from varexport.config.logging import get_logger
from varexport.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE
from varexport.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from varexport.config.logging import VarExportLogger
    from varexport.config.types import TomlTable

logger: VarExportLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_varexport_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the VarExport settings table from a parsed config document.

    ``pyproject.toml`` keeps the settings under ``[tool.varexport]``; any other
    file holds them at the top level.

    Args:
        path (Path): Path the document was read from (its name selects the layout).
        data (TomlTable): Parsed document.

    Returns:
        TomlTable | None: The settings table, or None when a ``pyproject.toml``
            has no ``[tool.varexport]`` table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data

    table: Any = data
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(table, Mapping):
            return None
        table = cast("Mapping[str, Any]", table).get(key)
    if table is None:
        logger.debug("No [%s] table in %s", ".".join(PYPROJECT_TOOL_TABLE), path)
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_TOOL_TABLE)}] in {path} must be a table")
    return cast("TomlTable", table)


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a configuration mapping to a TOML string.

    TOML has no ``null``: keys with a ``None`` value are omitted.

    Args:
        toml_dict (Mapping[str, Any]): Mapping to render.

    Returns:
        str: TOML document text.
    """
    cleaned: dict[str, Any] = {}
    for key, value in toml_dict.items():
        if value is None:
            logger.debug("Ignoring `None` entry for key %s", key)
            continue
        cleaned[key] = value
    return tomlkit.dumps(cleaned)
