# topmark:header:start
#
#   project      : VarExport
#   file         : __init__.py
#   file_relpath : src/varexport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for VarExport.

Re-exports the immutable [`ExportConfig`][varexport.config.model.ExportConfig]
read by the export engine, its mutable builder, and the option types.
"""

from __future__ import annotations

from varexport.config.model import ExportConfig, MutableExportConfig
from varexport.config.types import ArgsLike, ClassReferenceStyle

__all__ = [
    "ArgsLike",
    "ClassReferenceStyle",
    "ExportConfig",
    "MutableExportConfig",
]
