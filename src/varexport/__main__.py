# topmark:header:start
#
#   project      : VarExport
#   file         : __main__.py
#   file_relpath : src/varexport/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow running VarExport as a module: `python -m varexport`."""

from varexport.cli.main import cli

if __name__ == "__main__":
    cli()
