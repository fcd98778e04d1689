# topmark:header:start
#
#   project      : VarExport
#   file         : api.py
#   file_relpath : src/varexport/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for VarExport.

This module exposes the stable entry points for exporting values as Python
source. The returned text is a single expression (or an assignment statement
when ``assign_to`` is set) that needs no imports to be evaluated.

Examples:
    ```python
    from varexport import ExportConfig, export

    export({"name": "demo", "tags": ["a", "b"]})
    export(order, ExportConfig(add_type_hints=True, indent="  "))
    ```

Errors:
    Every export failure raises a subclass of `ExportError` and no partial
    output is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from varexport.config.logging import get_logger
from varexport.config.model import ExportConfig
from varexport.exporter.engine import GenericExporter, finalize

if TYPE_CHECKING:
    from varexport.config.logging import VarExportLogger
    from varexport.exporter.registry import StrategyRegistry

logger: VarExportLogger = get_logger(__name__)


def export_lines(
    value: Any,
    config: ExportConfig | None = None,
    *,
    registry: StrategyRegistry | None = None,
) -> list[str]:
    """Export ``value`` as a list of source lines.

    Args:
        value (Any): Value to export.
        config (ExportConfig | None): Formatting options; defaults apply when None.
        registry (StrategyRegistry | None): Object strategies; defaults to the
            process-wide registry.

    Returns:
        list[str]: Source lines, in render order.

    Raises:
        ExportError: If ``value`` or a nested value cannot be exported.
    """
    resolved = config or ExportConfig()
    exporter = GenericExporter(resolved, registry=registry)
    lines = finalize(exporter.export(value), resolved)
    logger.debug("Exported %s as %d line(s)", type(value).__name__, len(lines))
    return lines


def export(
    value: Any,
    config: ExportConfig | None = None,
    *,
    registry: StrategyRegistry | None = None,
) -> str:
    """Export ``value`` as Python source text.

    Args:
        value (Any): Value to export.
        config (ExportConfig | None): Formatting options; defaults apply when None.
        registry (StrategyRegistry | None): Object strategies; defaults to the
            process-wide registry.

    Returns:
        str: The source text, lines joined with ``\\n`` and no trailing newline.

    Raises:
        ExportError: If ``value`` or a nested value cannot be exported.
    """
    return "\n".join(export_lines(value, config, registry=registry))
