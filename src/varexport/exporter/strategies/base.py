# topmark:header:start
#
#   project      : VarExport
#   file         : base.py
#   file_relpath : src/varexport/exporter/strategies/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Object strategy base module for the VarExport engine.

This module defines the `ObjectStrategy` base class. A strategy knows how to
turn one *shape* of object into Python source: the registry asks each
strategy, in priority order, whether it `supports` an object, and the first
one that does `export`s it.

Strategies are stateless: everything that varies per call (configuration,
recursion, error location) is reached through the
[`GenericExporter`][varexport.exporter.engine.GenericExporter] passed to
`export`. A single strategy instance can therefore serve concurrent export
calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from varexport.config.logging import get_logger
from varexport.config.types import ClassReferenceStyle
from varexport.constants import CLASS_LOCAL_NAME, OBJECT_LOCAL_NAME
from varexport.errors import UnsupportedTypeError
from varexport.exporter.buffer import wrap_in_scope
from varexport.exporter.shapes import Visibility

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from varexport.config.model import ExportConfig
    from varexport.exporter.engine import GenericExporter
    from varexport.exporter.shapes import AttributeDescriptor, ShapeDescriptor

logger = get_logger(__name__)


class ObjectStrategy:
    """Base class for strategies exporting one shape of object.

    Responsibilities:
        - **Selection:** `supports` decides from the object, its shape and the
          configuration whether this strategy can faithfully export it.
        - **Emission:** `export` returns the lines of a Python expression that
          rebuilds the object, recursing into the engine for nested values.

    Helpers shared by subclasses:
        - `class_reference`: how generated code names a class.
        - `get_create_object_code`: allocation, bypassing ``__init__``.
        - `iter_exported_attributes`: initialized attributes after filtering.
        - `wrap_in_scope`: isolate temporary local names.
    """

    def supports(self, obj: object, shape: ShapeDescriptor, config: ExportConfig) -> bool:
        """Return whether this strategy can export ``obj``.

        Args:
            obj (object): The object to export.
            shape (ShapeDescriptor): Reflective view of ``obj``.
            config (ExportConfig): Active configuration.

        Returns:
            bool: True if `export` can handle ``obj``.
        """
        raise NotImplementedError

    def export(
        self,
        obj: Any,
        shape: ShapeDescriptor,
        exporter: GenericExporter,
        depth: int,
    ) -> list[str]:
        """Export ``obj`` as lines of Python source.

        Args:
            obj (Any): The object to export.
            shape (ShapeDescriptor): Reflective view of ``obj``.
            exporter (GenericExporter): Engine running the current export call.
            depth (int): Nesting depth of ``obj``.

        Returns:
            list[str]: The lines of an expression evaluating to a copy of ``obj``.

        Raises:
            ExportError: If ``obj`` or a nested value cannot be exported.
        """
        raise NotImplementedError

    # ---------------------------- Helpers ----------------------------

    @staticmethod
    def class_reference(cls: type, exporter: GenericExporter) -> str:
        """Return the expression generated code uses to name ``cls``.

        Builtins are named directly; other classes follow the configured
        [`ClassReferenceStyle`][varexport.config.types.ClassReferenceStyle].

        Args:
            cls (type): Class to reference.
            exporter (GenericExporter): Engine running the current export call.

        Returns:
            str: A Python expression evaluating to ``cls``.

        Raises:
            UnsupportedTypeError: If ``cls`` is defined inside a function.
        """
        module: str = cls.__module__
        qualname: str = cls.__qualname__
        if "<locals>" in qualname:
            raise exporter.error(
                UnsupportedTypeError,
                f'Class "{module}.{qualname}" is defined inside a function '
                "and cannot be referenced from generated code.",
            )
        if module == "builtins":
            return qualname

        style = exporter.config.class_reference
        if style is ClassReferenceStyle.NAME:
            return qualname
        if style is ClassReferenceStyle.QUALIFIED:
            return f"{module}.{qualname}"
        head = qualname.split(".", 1)[0]
        return f"__import__({module!r}, fromlist=[{head!r}]).{qualname}"

    def get_create_object_code(self, shape: ShapeDescriptor, exporter: GenericExporter) -> list[str]:
        """Return the code binding a new instance of ``shape.type`` to ``obj``.

        Classes without their own ``__init__``/``__new__`` are called directly.
        Otherwise the class is bound to ``cls`` and allocated through
        ``object.__new__(cls)``, which never runs the declared constructor: it may
        require arguments not available here, or have side effects.

        Args:
            shape (ShapeDescriptor): Shape of the object being rebuilt.
            exporter (GenericExporter): Engine running the current export call.

        Returns:
            list[str]: Scope lines (see `wrap_in_scope`).
        """
        ref = self.class_reference(shape.type, exporter)
        if not shape.has_constructor:
            return [f"({OBJECT_LOCAL_NAME} := {ref}()),"]

        lines = [f"({CLASS_LOCAL_NAME} := {ref}),"]
        if exporter.config.add_type_hints:
            lines.append("")
            lines.append(f"# type: {shape.type_name}")
        lines.append(f"({OBJECT_LOCAL_NAME} := object.__new__({CLASS_LOCAL_NAME})),")
        return lines

    @staticmethod
    def iter_exported_attributes(
        shape: ShapeDescriptor, config: ExportConfig
    ) -> Iterator[AttributeDescriptor]:
        """Yield the attributes to rebuild, in declaration order.

        Uninitialized attributes are always skipped; ``public_only`` and
        ``skip_dynamic_attributes`` narrow the selection further.
        """
        for attribute in shape.attributes:
            if not attribute.initialized:
                logger.trace("Skipping uninitialized attribute %s", attribute.name)
                continue
            if config.public_only and attribute.visibility is not Visibility.PUBLIC:
                continue
            if config.skip_dynamic_attributes and not attribute.declared:
                continue
            yield attribute

    @staticmethod
    def wrap_in_scope(lines: Sequence[str], exporter: GenericExporter) -> list[str]:
        """Wrap ``lines`` in their own lexical scope (see `buffer.wrap_in_scope`)."""
        return wrap_in_scope(lines, exporter.config.indent)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
