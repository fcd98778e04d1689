# topmark:header:start
#
#   project      : VarExport
#   file         : state.py
#   file_relpath : src/varexport/exporter/strategies/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Handles objects implementing the ``__getstate__``/``__setstate__`` protocol.

Such classes decide themselves which state matters (the protocol `pickle`
and `copy` rely on), so the object is allocated without its constructor and
handed its state back through ``__setstate__``::

    (lambda: (
        (cls := __import__('app.cache', fromlist=['LRUCache']).LRUCache),
        (obj := object.__new__(cls)),
        obj.__setstate__({
            'capacity': 128,
        }),
        obj,
    )[-1])()

Disabled by ``use_state_protocol = false``, in which case these objects are
rebuilt attribute by attribute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from varexport.constants import OBJECT_LOCAL_NAME
from varexport.exporter.buffer import append_to_last, prefix_first
from varexport.exporter.registry import register_strategy
from varexport.exporter.strategies.base import ObjectStrategy

if TYPE_CHECKING:
    from varexport.config.model import ExportConfig
    from varexport.exporter.engine import GenericExporter
    from varexport.exporter.shapes import ShapeDescriptor


@register_strategy(priority=30)
class StateProtocolStrategy(ObjectStrategy):
    """Rebuild objects through their ``__setstate__`` method."""

    def supports(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> bool:
        """Accept non-opaque objects whose class defines ``__setstate__``."""
        return (
            config.use_state_protocol
            and not shape.is_opaque
            and callable(getattr(shape.type, "__setstate__", None))
        )

    def export(
        self,
        obj: Any,
        shape: ShapeDescriptor,
        exporter: GenericExporter,
        depth: int,
    ) -> list[str]:
        """Allocate, then restore the state returned by ``__getstate__``."""
        lines = self.get_create_object_code(shape, exporter)

        state = self.get_state(obj)
        # Same convention as pickle: a None state means nothing to restore
        if state is not None:
            state_lines = exporter.export_child(state, ".__getstate__()", depth + 1)
            setter = f"{OBJECT_LOCAL_NAME}.__setstate__("
            lines.extend(append_to_last(prefix_first(setter, state_lines), "),"))

        lines.append(f"{OBJECT_LOCAL_NAME},")
        return self.wrap_in_scope(lines, exporter)

    @staticmethod
    def get_state(obj: Any) -> Any:
        """Return the state of ``obj`` as `pickle` would see it."""
        getstate = getattr(obj, "__getstate__", None)
        if getstate is not None:
            return getstate()
        # Python < 3.11 has no default object.__getstate__
        instance_dict: dict[str, Any] = getattr(obj, "__dict__", {})
        return dict(instance_dict) or None
