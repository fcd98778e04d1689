# topmark:header:start
#
#   project      : VarExport
#   file         : __init__.py
#   file_relpath : src/varexport/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for VarExport."""

from __future__ import annotations
