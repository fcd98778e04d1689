# topmark:header:start
#
#   project      : VarExport
#   file         : __init__.py
#   file_relpath : src/varexport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VarExport package.

VarExport turns Python values (scalars, collections and arbitrary objects)
into Python source that rebuilds them when evaluated. Objects are rebuilt
without running their constructors. It exposes a small typed API and a CLI.
"""

from __future__ import annotations

from varexport.api import export, export_lines
from varexport.config import ClassReferenceStyle, ExportConfig, MutableExportConfig
from varexport.errors import (
    ConfigError,
    CyclicReferenceError,
    ExportError,
    UninitializedAttributeError,
    UnsupportedTypeError,
    VarExportError,
)

__all__ = [
    "ClassReferenceStyle",
    "ConfigError",
    "CyclicReferenceError",
    "ExportConfig",
    "ExportError",
    "MutableExportConfig",
    "UninitializedAttributeError",
    "UnsupportedTypeError",
    "VarExportError",
    "export",
    "export_lines",
]
