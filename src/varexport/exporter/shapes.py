# topmark:header:start
#
#   project      : VarExport
#   file         : shapes.py
#   file_relpath : src/varexport/exporter/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reflective view of object instances.

`ShapeInspector` turns an object into a `ShapeDescriptor`: its class, whether
that class is *opaque* (implemented natively, with state the interpreter does
not expose attribute by attribute), whether it declares a constructor, and its
attributes in declaration order.

Attribute order:
    1. Declared attributes, walking the MRO from the root towards the concrete
       class: ``__slots__`` entries first, then annotated instance fields
       (``ClassVar`` annotations excluded).
    2. Dynamic attributes found in the instance ``__dict__``, in insertion order.

Reading is side-effect free: slot values go through the slot descriptors and
the instance dictionary through ``object.__getattribute__``, so overridden
``__getattr__``/``__getattribute__`` hooks never run.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Final, get_origin

from varexport.config.logging import get_logger
from varexport.errors import UninitializedAttributeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from varexport.config.logging import VarExportLogger

logger: VarExportLogger = get_logger(__name__)

# CPython type flags. Classes created by a class statement are heap types and
# never immutable; native types either lack Py_TPFLAGS_HEAPTYPE (static types)
# or carry Py_TPFLAGS_IMMUTABLETYPE (heap types built from a C spec).
HEAPTYPE_FLAG: Final[int] = 1 << 9
IMMUTABLETYPE_FLAG: Final[int] = 1 << 8

# Native bases that hold no per-instance state.
STATELESS_NATIVE_BASES: Final[tuple[type, ...]] = (object, typing.Generic)

# Slots that describe instance machinery rather than state.
MACHINERY_SLOTS: Final[frozenset[str]] = frozenset({"__dict__", "__weakref__"})


class Visibility(str, Enum):
    """Naming-convention visibility of an attribute."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


@dataclass(frozen=True)
class AttributeDescriptor:
    """One attribute of an inspected object.

    Attributes:
        name (str): Stored attribute name (mangled for private names).
        visibility (Visibility): Visibility derived from the name.
        initialized (bool): Whether the instance holds a value for the attribute.
        declared (bool): Declared through ``__slots__`` or a class annotation,
            as opposed to set dynamically on the instance.
    """

    name: str
    visibility: Visibility
    initialized: bool
    declared: bool
    _value: Any = field(default=None, repr=False, compare=False)

    @property
    def value(self) -> Any:
        """Current value of the attribute.

        Raises:
            UninitializedAttributeError: If the attribute is not initialized.
        """
        if not self.initialized:
            raise UninitializedAttributeError(f"Attribute '{self.name}' is not initialized")
        return self._value


@dataclass(frozen=True)
class ShapeDescriptor:
    """Read-only reflective description of one object.

    Built when the object is visited and discarded once its code is emitted.

    Attributes:
        type (type): Concrete class of the object.
        type_name (str): Dotted ``module.qualname`` (bare name for builtins).
        is_opaque (bool): The class keeps native state that cannot be enumerated.
        has_constructor (bool): The class defines ``__init__`` or ``__new__``.
        attributes (tuple[AttributeDescriptor, ...]): Attributes in declaration
            order; empty for opaque objects.
    """

    type: type
    type_name: str
    is_opaque: bool
    has_constructor: bool
    attributes: tuple[AttributeDescriptor, ...] = ()


class ShapeInspector:
    """Builds `ShapeDescriptor` views of object instances."""

    def inspect(self, obj: object) -> ShapeDescriptor:
        """Describe ``obj``.

        Args:
            obj (object): Instance to inspect; never mutated.

        Returns:
            ShapeDescriptor: The shape of ``obj``.
        """
        cls = type(obj)
        opaque = self.is_opaque(cls)
        shape = ShapeDescriptor(
            type=cls,
            type_name=self.type_name(cls),
            is_opaque=opaque,
            has_constructor=self.has_accessible_constructor(cls),
            attributes=() if opaque else tuple(self.list_attributes(obj)),
        )
        logger.trace(
            "Shape of %s: opaque=%s, constructor=%s, %d attribute(s)",
            shape.type_name,
            shape.is_opaque,
            shape.has_constructor,
            len(shape.attributes),
        )
        return shape

    @staticmethod
    def type_name(cls: type) -> str:
        """Return the dotted name of ``cls`` (bare qualname for builtins)."""
        if cls.__module__ == "builtins":
            return cls.__qualname__
        return f"{cls.__module__}.{cls.__qualname__}"

    @staticmethod
    def is_opaque(cls: type) -> bool:
        """Return True if ``cls`` (or a stateful base) is implemented natively.

        Functions, modules, files, sockets, locks, generators, exceptions and
        subclasses of builtin containers all fall in this category.
        """
        return any(
            _is_native(klass)
            for klass in cls.__mro__
            if klass not in STATELESS_NATIVE_BASES
        )

    @staticmethod
    def has_accessible_constructor(cls: type) -> bool:
        """Return True if ``cls`` defines its own ``__init__`` or ``__new__``."""
        return cls.__init__ is not object.__init__ or cls.__new__ is not object.__new__

    def list_attributes(self, obj: object) -> Iterator[AttributeDescriptor]:
        """Yield the attributes of ``obj`` in declaration order.

        Args:
            obj (object): Non-opaque instance.

        Yields:
            AttributeDescriptor: One descriptor per attribute.
        """
        cls = type(obj)
        instance_dict = _instance_dict(obj)

        # stored name -> class owning the slot (None for annotated fields)
        declared: dict[str, type | None] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for slot in _own_slots(klass):
                declared.setdefault(_mangle(slot, klass), klass)
            for name in _own_instance_annotations(klass):
                declared.setdefault(name, None)

        for name, slot_owner in declared.items():
            initialized = False
            value: Any = None
            if slot_owner is not None:
                descriptor = slot_owner.__dict__.get(name)
                if inspect.ismemberdescriptor(descriptor):
                    try:
                        value = descriptor.__get__(obj, slot_owner)
                        initialized = True
                    except AttributeError:
                        pass
            elif name in instance_dict:
                value = instance_dict[name]
                initialized = True
            logger.trace("Declared attribute %s.%s: initialized=%s", cls.__name__, name, initialized)
            yield AttributeDescriptor(
                name=name,
                visibility=_visibility(name, cls),
                initialized=initialized,
                declared=True,
                _value=value,
            )

        for name, value in instance_dict.items():
            if not isinstance(name, str):
                logger.warning("Ignoring non-string attribute key %r on %s", name, cls.__name__)
                continue
            if name in declared:
                continue
            yield AttributeDescriptor(
                name=name,
                visibility=_visibility(name, cls),
                initialized=True,
                declared=False,
                _value=value,
            )


def _is_native(klass: type) -> bool:
    flags: int = klass.__flags__
    return not flags & HEAPTYPE_FLAG or bool(flags & IMMUTABLETYPE_FLAG)


def _instance_dict(obj: object) -> dict[Any, Any]:
    try:
        return object.__getattribute__(obj, "__dict__")
    except AttributeError:
        return {}


def _own_slots(klass: type) -> tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return tuple(s for s in slots if s not in MACHINERY_SLOTS)


def _own_instance_annotations(klass: type) -> list[str]:
    try:
        annotations = inspect.get_annotations(klass)
    except NameError as exc:
        # Unresolvable forward reference; dynamic attributes are still listed
        logger.debug("Cannot read annotations of %s: %s", klass.__qualname__, exc)
        return []
    return [name for name, annotation in annotations.items() if not _is_classvar(annotation)]


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _mangle(name: str, klass: type) -> str:
    """Return the stored form of a name declared in the body of ``klass``."""
    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = klass.__name__.lstrip("_")
    return f"_{stripped}{name}" if stripped else name


def _visibility(name: str, cls: type) -> Visibility:
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    for klass in cls.__mro__:
        prefix = f"_{klass.__name__.lstrip('_')}__"
        if name.startswith(prefix) and len(name) > len(prefix):
            return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC
