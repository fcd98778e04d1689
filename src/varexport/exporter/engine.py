# topmark:header:start
#
#   project      : VarExport
#   file         : engine.py
#   file_relpath : src/varexport/exporter/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic export engine.

`GenericExporter` walks a value depth first and returns the lines of a Python
expression rebuilding it:

- Literal kinds (matched by exact type) are emitted by the engine itself:
  ``None``, ``bool``, ``int``, ``float``, ``complex``, ``str`` and ``bytes``
  through their ``repr``; ``list``, ``tuple``, ``set``, ``frozenset`` and
  ``dict`` as multi-line displays whose elements are exported recursively.
- Everything else is an *object*: the engine inspects it and hands it to the
  strategy selected by the [`StrategyRegistry`][varexport.exporter.registry.StrategyRegistry].

One exporter serves one export call. It tracks the containers and objects on
the active recursion path to reject cycles, and the path of the value being
exported so errors can point at it.
"""

from __future__ import annotations

import cmath
import math
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Final, TypeVar

from varexport.config.logging import get_logger
from varexport.errors import CyclicReferenceError
from varexport.exporter.buffer import append_to_last, indent, prefix_first
from varexport.exporter.registry import get_strategy_registry
from varexport.exporter.shapes import ShapeInspector

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from varexport.config.logging import VarExportLogger
    from varexport.config.model import ExportConfig
    from varexport.errors import ExportError
    from varexport.exporter.registry import StrategyRegistry

logger: VarExportLogger = get_logger(__name__)

E = TypeVar("E", bound="ExportError")

SCALAR_TYPES: Final[tuple[type, ...]] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)

# Opening delimiter, closing delimiter and empty form of each collection type
COLLECTION_DELIMITERS: Final[dict[type, tuple[str, str, str]]] = {
    list: ("[", "]", "[]"),
    tuple: ("(", ")", "()"),
    set: ("{", "}", "set()"),
    frozenset: ("frozenset({", "})", "frozenset()"),
}


class GenericExporter:
    """Recursive exporter for one export call.

    Args:
        config (ExportConfig): Formatting options, read-only for the whole call.
        registry (StrategyRegistry | None): Object strategies; defaults to the
            process-wide registry.
        inspector (ShapeInspector | None): Reflective inspector for objects.

    Attributes:
        config (ExportConfig): Formatting options.
        registry (StrategyRegistry): Object strategies.
        inspector (ShapeInspector): Reflective inspector.
    """

    def __init__(
        self,
        config: ExportConfig,
        registry: StrategyRegistry | None = None,
        inspector: ShapeInspector | None = None,
    ) -> None:
        self.config = config
        self.registry = registry if registry is not None else get_strategy_registry()
        self.inspector = inspector or ShapeInspector()

        # ids of the containers/objects being exported on the current path
        self._active: set[int] = set()
        self._path: list[str] = []

    # ---------------------------- Entry points ----------------------------

    def export(self, value: Any, depth: int = 0) -> list[str]:
        """Return the lines of an expression rebuilding ``value``.

        Args:
            value (Any): Value to export.
            depth (int): Nesting depth of ``value``.

        Returns:
            list[str]: Lines; the first one is positioned by the caller, the
                following ones are indented relative to it.

        Raises:
            ExportError: If ``value`` or a nested value cannot be exported.
        """
        kind = type(value)
        logger.trace("Exporting %s at depth %d (path: %s)", kind.__name__, depth, self.path)

        if kind in SCALAR_TYPES:
            return [self.export_scalar(value)]

        with self._visiting(value):
            if kind in COLLECTION_DELIMITERS:
                return self._export_collection(value, depth)
            if kind is dict:
                return self._export_dict(value, depth)
            return self._export_object(value, depth)

    def export_child(self, value: Any, segment: str, depth: int) -> list[str]:
        """Export a nested value, recording ``segment`` in the error path.

        Args:
            value (Any): Nested value.
            segment (str): Path segment, e.g. ``[0]``, ``['key']`` or ``.attr``.
            depth (int): Nesting depth of ``value``.

        Returns:
            list[str]: Lines of the nested value.
        """
        self._path.append(segment)
        try:
            return self.export(value, depth)
        finally:
            self._path.pop()

    def export_scalar(self, value: Any) -> str:
        """Return the literal of a scalar value.

        Non-finite floats have no literal and are written as ``float()`` calls;
        complex numbers with a non-finite part go through ``complex()``.
        """
        if type(value) is float and not math.isfinite(value):
            if math.isnan(value):
                return "float('nan')"
            return "float('inf')" if value > 0 else "-float('inf')"
        if type(value) is complex and not cmath.isfinite(value):
            return f"complex({self.export_scalar(value.real)}, {self.export_scalar(value.imag)})"
        return repr(value)

    # ---------------------------- Errors ----------------------------

    @property
    def path(self) -> str:
        """Location of the value currently being exported (empty at the top level)."""
        return "".join(self._path)

    def error(self, error_cls: type[E], reason: str) -> E:
        """Build an export error located at the current path.

        Args:
            error_cls (type[E]): Error class.
            reason (str): Description of the failure.

        Returns:
            E: The error, for the caller to raise.
        """
        return error_cls(reason, path=self.path)

    @contextmanager
    def _visiting(self, value: Any) -> Iterator[None]:
        key = id(value)
        if key in self._active:
            raise self.error(
                CyclicReferenceError,
                f'Value of type "{type(value).__qualname__}" contains a reference to itself.',
            )
        self._active.add(key)
        try:
            yield
        finally:
            self._active.discard(key)

    # ---------------------------- Collections ----------------------------

    def _export_collection(self, value: Any, depth: int) -> list[str]:
        kind = type(value)
        opening, closing, empty = COLLECTION_DELIMITERS[kind]
        if not value:
            return [empty]

        if self.config.inline_scalar_lists and kind in (list, tuple):
            if all(type(item) in SCALAR_TYPES for item in value):
                items = ", ".join(self.export_scalar(item) for item in value)
                if kind is tuple and len(value) == 1:
                    items += ","
                return [f"{opening}{items}{closing}"]

        entries = [
            self.export_child(item, f"[{index}]", depth + 1) for index, item in enumerate(value)
        ]
        keep_last_comma = kind is tuple and len(value) == 1
        return self._wrap_entries(opening, closing, entries, keep_last_comma=keep_last_comma)

    def _export_dict(self, value: dict[Any, Any], depth: int) -> list[str]:
        if not value:
            return ["{}"]

        entries: list[list[str]] = []
        for key, item in value.items():
            segment = f"[{key!r}]"
            key_lines = self.export_child(key, segment, depth + 1)
            item_lines = self.export_child(item, segment, depth + 1)
            entries.append(
                key_lines[:-1] + [f"{key_lines[-1]}: {item_lines[0]}"] + item_lines[1:]
            )
        return self._wrap_entries("{", "}", entries)

    def _wrap_entries(
        self,
        opening: str,
        closing: str,
        entries: Iterable[list[str]],
        *,
        keep_last_comma: bool = False,
    ) -> list[str]:
        """Place each entry on its own indented line(s), comma-separated."""
        entries = list(entries)
        unit = self.config.indent
        lines = [opening]
        for position, entry in enumerate(entries, start=1):
            is_last = position == len(entries)
            if not is_last or self.config.trailing_comma or keep_last_comma:
                entry = append_to_last(entry, ",")
            lines.extend(indent(entry, 1, unit))
        lines.append(closing)
        return lines

    # ---------------------------- Objects ----------------------------

    def _export_object(self, value: Any, depth: int) -> list[str]:
        shape = self.inspector.inspect(value)
        strategy = self.registry.dispatch(value, shape, self.config)
        return strategy.export(value, shape, self, depth)


def finalize(lines: list[str], config: ExportConfig) -> list[str]:
    """Apply the top-level options to an exported fragment.

    ``indent_level`` indents every line but the first; ``assign_to`` turns the
    expression into an assignment statement.

    Args:
        lines (list[str]): Fragment returned by `GenericExporter.export`.
        config (ExportConfig): Active configuration.

    Returns:
        list[str]: The final lines.
    """
    if config.indent_level:
        lines = lines[:1] + indent(lines[1:], config.indent_level, config.indent)
    if config.assign_to:
        lines = prefix_first(f"{config.assign_to} = ", lines)
    return lines
