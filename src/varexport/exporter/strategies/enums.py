# topmark:header:start
#
#   project      : VarExport
#   file         : enums.py
#   file_relpath : src/varexport/exporter/strategies/enums.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Handles enum members by reference to their class."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from varexport.exporter.buffer import (
    append_to_last,
    escape_identifier,
    is_bare_identifier,
    prefix_first,
)
from varexport.exporter.registry import register_strategy
from varexport.exporter.strategies.base import ObjectStrategy

if TYPE_CHECKING:
    from varexport.config.model import ExportConfig
    from varexport.exporter.engine import GenericExporter
    from varexport.exporter.shapes import ShapeDescriptor


@register_strategy(priority=10)
class EnumStrategy(ObjectStrategy):
    """Export enum members as ``Cls.NAME``, ``Cls['name']`` or ``Cls(value)``.

    Members are singletons, so they are referenced instead of rebuilt. Names
    that are not bare identifiers use item access; composite flag values,
    which have no member of their own, are rebuilt from their value.
    """

    def supports(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> bool:
        """Accept enum members (including ``IntEnum`` and ``Flag`` values)."""
        return isinstance(obj, Enum)

    def export(
        self,
        obj: Any,
        shape: ShapeDescriptor,
        exporter: GenericExporter,
        depth: int,
    ) -> list[str]:
        """Reference the member, by name when it has one."""
        ref = self.class_reference(shape.type, exporter)
        name: str | None = obj.name
        if name is not None and shape.type.__members__.get(name) is obj:
            if is_bare_identifier(name):
                return [f"{ref}.{name}"]
            return [f"{ref}[{escape_identifier(name)}]"]

        value_lines = exporter.export_child(obj.value, ".value", depth + 1)
        return append_to_last(prefix_first(f"{ref}(", value_lines), ")")
