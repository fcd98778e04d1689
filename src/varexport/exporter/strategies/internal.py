# topmark:header:start
#
#   project      : VarExport
#   file         : internal.py
#   file_relpath : src/varexport/exporter/strategies/internal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Throws on internal (natively implemented) types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from varexport.errors import UnsupportedTypeError
from varexport.exporter.strategies.base import ObjectStrategy

if TYPE_CHECKING:
    from varexport.config.model import ExportConfig
    from varexport.exporter.engine import GenericExporter
    from varexport.exporter.shapes import ShapeDescriptor


class OpaqueTypeStrategy(ObjectStrategy):
    """Terminal strategy: accepts every object and rejects it.

    The registry reaches it when no other strategy supports an object, which
    for the default registry means the object is opaque.
    """

    def supports(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> bool:
        """Accept every object."""
        return True

    def export(
        self,
        obj: Any,
        shape: ShapeDescriptor,
        exporter: GenericExporter,
        depth: int,
    ) -> NoReturn:
        """Reject ``obj``.

        Raises:
            UnsupportedTypeError: Always.
        """
        if shape.is_opaque:
            reason = f'Type "{shape.type_name}" is internal, and cannot be exported.'
        else:
            reason = f'No strategy can export an object of type "{shape.type_name}".'
        raise exporter.error(UnsupportedTypeError, reason)
