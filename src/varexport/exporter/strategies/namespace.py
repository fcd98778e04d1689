# topmark:header:start
#
#   project      : VarExport
#   file         : namespace.py
#   file_relpath : src/varexport/exporter/strategies/namespace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Handles `types.SimpleNamespace` instances through keyword arguments."""

from __future__ import annotations

import types
from typing import TYPE_CHECKING, Any

from varexport.exporter.buffer import (
    append_to_last,
    escape_identifier,
    indent,
    is_bare_identifier,
    prefix_first,
)
from varexport.exporter.registry import register_strategy
from varexport.exporter.strategies.base import ObjectStrategy

if TYPE_CHECKING:
    from varexport.config.model import ExportConfig
    from varexport.exporter.engine import GenericExporter
    from varexport.exporter.shapes import ShapeDescriptor


@register_strategy(priority=20)
class NamespaceStrategy(ObjectStrategy):
    """Export a `SimpleNamespace` as a constructor call with keyword arguments.

    `SimpleNamespace` is a native type, so it must be matched before the
    terminal strategy. Attributes whose names cannot be keywords are passed
    through ``**{'name': value}`` at their original position::

        __import__('types', fromlist=['SimpleNamespace']).SimpleNamespace(
            host='localhost',
            **{'max-retries': 3},
        )
    """

    def supports(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> bool:
        """Accept exact `SimpleNamespace` instances (subclasses go elsewhere)."""
        return type(obj) is types.SimpleNamespace

    def export(
        self,
        obj: Any,
        shape: ShapeDescriptor,
        exporter: GenericExporter,
        depth: int,
    ) -> list[str]:
        """Emit the constructor call."""
        ref = self.class_reference(shape.type, exporter)
        attributes: dict[str, Any] = object.__getattribute__(obj, "__dict__")
        if not attributes:
            return [f"{ref}()"]

        unit = exporter.config.indent
        lines = [f"{ref}("]
        for name, value in attributes.items():
            escaped = escape_identifier(name)
            value_lines = exporter.export_child(value, f".{escaped}", depth + 1)
            if is_bare_identifier(name):
                item = append_to_last(prefix_first(f"{name}=", value_lines), ",")
            else:
                item = append_to_last(prefix_first(f"**{{{escaped}: ", value_lines), "},")
            lines.extend(indent(item, 1, unit))
        lines.append(")")
        return lines
