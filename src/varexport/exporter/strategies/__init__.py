# topmark:header:start
#
#   project      : VarExport
#   file         : __init__.py
#   file_relpath : src/varexport/exporter/strategies/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all strategy modules in the current package."""

import importlib
import pkgutil
from pathlib import Path

from varexport.config.logging import get_logger

logger = get_logger(__name__)


# Dynamically import all modules in the strategies/ directory
def register_all_strategies() -> None:
    """Import all strategy modules in the current package.

    Importing a module runs its `register_strategy` decorators; modules already
    imported are not re-executed, so calling this repeatedly is harmless.
    """
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            importlib.import_module(f"{__name__}.{module_info.name}")
