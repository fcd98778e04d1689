# topmark:header:start
#
#   project      : VarExport
#   file         : __init__.py
#   file_relpath : src/varexport/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the VarExport CLI."""
