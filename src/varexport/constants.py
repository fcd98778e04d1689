# topmark:header:start
#
#   project      : VarExport
#   file         : constants.py
#   file_relpath : src/varexport/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VarExport Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    VAREXPORT_VERSION: str = get_version("varexport")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    VAREXPORT_VERSION = "0.0.0"

# Config file names searched during discovery, in order of precedence
VAREXPORT_TOML_NAME: str = "varexport.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Table holding VarExport settings inside pyproject.toml
PYPROJECT_TOOL_TABLE: tuple[str, str] = ("tool", "varexport")

DEFAULT_INDENT: str = "    "

# Local names bound inside the scope of a generated object construction
OBJECT_LOCAL_NAME: str = "obj"
CLASS_LOCAL_NAME: str = "cls"
