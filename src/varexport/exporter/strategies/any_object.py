# topmark:header:start
#
#   project      : VarExport
#   file         : any_object.py
#   file_relpath : src/varexport/exporter/strategies/any_object.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Handles any plain Python object, attribute by attribute.

The generated expression allocates the object without running its
constructor, assigns each initialized attribute with ``object.__setattr__``
(which bypasses ``__setattr__`` overrides, frozen dataclasses and
read-only properties alike), and yields the object::

    (lambda: (
        (cls := __import__('shop.models', fromlist=['Item']).Item),
        (obj := object.__new__(cls)),
        object.__setattr__(obj, 'sku', 'A-100'),
        object.__setattr__(obj, 'price', 12.5),
        obj,
    )[-1])()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from varexport.constants import OBJECT_LOCAL_NAME
from varexport.exporter.buffer import append_to_last, escape_identifier, prefix_first
from varexport.exporter.registry import register_strategy
from varexport.exporter.strategies.base import ObjectStrategy

if TYPE_CHECKING:
    from varexport.config.model import ExportConfig
    from varexport.exporter.engine import GenericExporter
    from varexport.exporter.shapes import ShapeDescriptor


@register_strategy(priority=100)
class GenericObjectStrategy(ObjectStrategy):
    """Fallback for every non-opaque object."""

    def supports(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> bool:
        """Accept any object whose state is reflectively observable."""
        return not shape.is_opaque

    def export(
        self,
        obj: Any,
        shape: ShapeDescriptor,
        exporter: GenericExporter,
        depth: int,
    ) -> list[str]:
        """Rebuild ``obj`` from its initialized attributes."""
        lines = self.get_create_object_code(shape, exporter)

        for attribute in self.iter_exported_attributes(shape, exporter.config):
            value_lines = exporter.export_child(
                attribute.value, f".{escape_identifier(attribute.name)}", depth + 1
            )
            setter = f"object.__setattr__({OBJECT_LOCAL_NAME}, {attribute.name!r}, "
            lines.extend(append_to_last(prefix_first(setter, value_lines), "),"))

        lines.append(f"{OBJECT_LOCAL_NAME},")
        return self.wrap_in_scope(lines, exporter)
