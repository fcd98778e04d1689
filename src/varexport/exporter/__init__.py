# topmark:header:start
#
#   project      : VarExport
#   file         : __init__.py
#   file_relpath : src/varexport/exporter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Export engine: recursive walk, reflective inspection and object strategies."""

from __future__ import annotations
