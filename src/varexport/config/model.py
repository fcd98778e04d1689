# topmark:header:start
#
#   project      : VarExport
#   file         : model.py
#   file_relpath : src/varexport/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `ExportConfig`: an immutable snapshot read by the export engine for the
      duration of one export call.
    - `MutableExportConfig`: a mutable builder used while layering defaults,
      config files and CLI/API overrides; it can be frozen into `ExportConfig`
      and thawed back for edits.

Scope:
    - *In scope*: data shapes, field validation, merge policy
      (`MutableExportConfig.merge_with`), and freeze/thaw mechanics.
    - *Out of scope*: TOML parsing and rendering, which live in
      `varexport.config.io`.

Immutability:
    - `ExportConfig` is ``frozen=True``; it is shared read-only through the
      whole recursive walk and never mutated mid-walk. Use `ExportConfig.thaw`
      → edit → `MutableExportConfig.freeze` for safe updates.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from varexport.config.io import extract_varexport_table, load_toml_dict
from varexport.config.keys import Toml
from varexport.config.logging import get_logger
from varexport.config.types import ClassReferenceStyle
from varexport.constants import DEFAULT_INDENT, PYPROJECT_TOML_NAME, VAREXPORT_TOML_NAME
from varexport.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from varexport.config.logging import VarExportLogger
    from varexport.config.types import ArgsLike, TomlTable

logger: VarExportLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Immutable formatting options for one export call.

    Attributes:
        add_type_hints (bool): Emit a ``# type: pkg.mod.Cls`` comment right before each
            constructor-bypassing allocation.
        indent (str): Indentation unit, repeated once per nesting level.
        indent_level (int): Extra indentation applied to every line but the first,
            for embedding the output in already-indented code.
        inline_scalar_lists (bool): Emit lists and tuples made only of scalars on one line.
        trailing_comma (bool): Suffix the last element of a multi-line collection with
            a comma (one-element tuples always keep theirs).
        class_reference (ClassReferenceStyle): How generated code refers to classes.
        use_state_protocol (bool): Rebuild objects defining ``__setstate__`` through
            that method instead of attribute by attribute.
        skip_dynamic_attributes (bool): Export only attributes declared through
            ``__slots__`` or class annotations.
        public_only (bool): Skip protected (``_x``) and private (``__x``) attributes.
        assign_to (str | None): When set, prefix the output with ``<name> = ``.
    """

    add_type_hints: bool = False
    indent: str = DEFAULT_INDENT
    indent_level: int = 0
    inline_scalar_lists: bool = False
    trailing_comma: bool = True
    class_reference: ClassReferenceStyle = ClassReferenceStyle.IMPORT
    use_state_protocol: bool = True
    skip_dynamic_attributes: bool = False
    public_only: bool = False
    assign_to: str | None = None

    def __post_init__(self) -> None:
        """Validate field values.

        Raises:
            ConfigError: If a field holds an unusable value.
        """
        if not self.indent or self.indent.strip():
            raise ConfigError(f"indent must be a non-empty whitespace string, got {self.indent!r}")
        if self.indent_level < 0:
            raise ConfigError(f"indent_level must be >= 0, got {self.indent_level}")
        if not isinstance(self.class_reference, ClassReferenceStyle):
            raise ConfigError(f"Invalid class_reference: {self.class_reference!r}")
        if self.assign_to is not None and (
            not self.assign_to.isidentifier() or keyword.iskeyword(self.assign_to)
        ):
            raise ConfigError(f"assign_to must be a Python identifier, got {self.assign_to!r}")

    def to_toml_dict(self) -> TomlTable:
        """Return a TOML-ready mapping of this configuration.

        Returns:
            TomlTable: Keys as accepted by `MutableExportConfig.from_toml_dict`;
                ``assign_to`` is ``None`` when unset (dropped when rendering).
        """
        return {
            Toml.KEY_ADD_TYPE_HINTS: self.add_type_hints,
            Toml.KEY_INDENT: self.indent,
            Toml.KEY_INDENT_LEVEL: self.indent_level,
            Toml.KEY_INLINE_SCALAR_LISTS: self.inline_scalar_lists,
            Toml.KEY_TRAILING_COMMA: self.trailing_comma,
            Toml.KEY_CLASS_REFERENCE: self.class_reference.value,
            Toml.KEY_USE_STATE_PROTOCOL: self.use_state_protocol,
            Toml.KEY_SKIP_DYNAMIC_ATTRIBUTES: self.skip_dynamic_attributes,
            Toml.KEY_PUBLIC_ONLY: self.public_only,
            Toml.KEY_ASSIGN_TO: self.assign_to,
        }

    def thaw(self) -> MutableExportConfig:
        """Return a mutable copy of this frozen config."""
        return MutableExportConfig(**{f.name: getattr(self, f.name) for f in fields(self)})


# ------------------ Mutable builder ------------------


@dataclass
class MutableExportConfig:
    """Mutable configuration used while layering config sources.

    Every field defaults to ``None``, meaning *inherit*: `merge_with` only lets
    set fields override, and `freeze` replaces the remaining ``None`` values by
    the `ExportConfig` defaults.
    """

    add_type_hints: bool | None = None
    indent: str | None = None
    indent_level: int | None = None
    inline_scalar_lists: bool | None = None
    trailing_comma: bool | None = None
    class_reference: ClassReferenceStyle | None = None
    use_state_protocol: bool | None = None
    skip_dynamic_attributes: bool | None = None
    public_only: bool | None = None
    assign_to: str | None = None

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> ExportConfig:
        """Freeze this builder into an immutable `ExportConfig`.

        Returns:
            ExportConfig: The validated snapshot.

        Raises:
            ConfigError: If a resolved value is invalid.
        """
        values: dict[str, Any] = {
            f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None
        }
        return ExportConfig(**values)

    @classmethod
    def from_defaults(cls) -> MutableExportConfig:
        """Return a builder holding every default value explicitly."""
        return ExportConfig().thaw()

    def merge_with(self, other: MutableExportConfig) -> MutableExportConfig:
        """Overlay ``other`` on top of this builder (in place).

        Fields set in ``other`` win; ``None`` fields in ``other`` inherit.

        Args:
            other (MutableExportConfig): Higher-precedence layer.

        Returns:
            MutableExportConfig: ``self``, for chaining.
        """
        for f in fields(other):
            value = getattr(other, f.name)
            if value is not None:
                setattr(self, f.name, value)
        return self

    # ---------------------------- TOML sources ----------------------------

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: str = "<dict>") -> MutableExportConfig:
        """Build a layer from a parsed VarExport settings table.

        Unknown keys are logged as warnings and ignored.

        Args:
            table (TomlTable): Settings table (already extracted from ``[tool.varexport]``).
            source (str): Name of the source, used in messages.

        Returns:
            MutableExportConfig: The layer; keys absent from ``table`` stay ``None``.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        known = set(Toml.all_keys())
        for key in table:
            if key not in known:
                logger.warning("Ignoring unknown config key '%s' in %s", key, source)

        draft = cls()
        draft.add_type_hints = _get_bool(table, Toml.KEY_ADD_TYPE_HINTS, source)
        draft.indent = _get_indent(table, Toml.KEY_INDENT, source)
        draft.indent_level = _get_int(table, Toml.KEY_INDENT_LEVEL, source)
        draft.inline_scalar_lists = _get_bool(table, Toml.KEY_INLINE_SCALAR_LISTS, source)
        draft.trailing_comma = _get_bool(table, Toml.KEY_TRAILING_COMMA, source)
        draft.class_reference = _get_class_reference(table, Toml.KEY_CLASS_REFERENCE, source)
        draft.use_state_protocol = _get_bool(table, Toml.KEY_USE_STATE_PROTOCOL, source)
        draft.skip_dynamic_attributes = _get_bool(table, Toml.KEY_SKIP_DYNAMIC_ATTRIBUTES, source)
        draft.public_only = _get_bool(table, Toml.KEY_PUBLIC_ONLY, source)
        draft.assign_to = _get_str(table, Toml.KEY_ASSIGN_TO, source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableExportConfig | None:
        """Build a layer from a ``varexport.toml`` or ``pyproject.toml`` file.

        Args:
            path (Path): Config file path.

        Returns:
            MutableExportConfig | None: The layer, or None when a ``pyproject.toml``
                has no ``[tool.varexport]`` table.
        """
        logger.debug("Loading config from %s", path)
        table = extract_varexport_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, source=str(path))

    @classmethod
    def discover(cls, start: Path) -> Path | None:
        """Find the nearest config file at or above ``start``.

        In each directory ``varexport.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts when it has a ``[tool.varexport]`` table.

        Args:
            start (Path): Directory (or file) to start from.

        Returns:
            Path | None: The config file, or None when nothing is found.
        """
        current = start if start.is_dir() else start.parent
        for directory in (current, *current.parents):
            candidate = directory / VAREXPORT_TOML_NAME
            if candidate.is_file():
                return candidate
            candidate = directory / PYPROJECT_TOML_NAME
            if candidate.is_file():
                if extract_varexport_table(candidate, load_toml_dict(candidate)) is not None:
                    return candidate
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        discover_from: Path | None = None,
        overrides: ArgsLike | None = None,
    ) -> MutableExportConfig:
        """Layer defaults, a config file and overrides (lowest to highest precedence).

        Args:
            config_file (Path | None): Explicit config file; disables discovery.
            discover_from (Path | None): Directory to start discovery from; None
                disables discovery.
            overrides (ArgsLike | None): CLI/API overrides, see `apply_overrides`.

        Returns:
            MutableExportConfig: The merged builder (call `freeze` to use it).
        """
        draft = cls.from_defaults()
        path = config_file
        if path is None and discover_from is not None:
            path = cls.discover(discover_from)
        if path is not None:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft.merge_with(layer)
        if overrides:
            draft.apply_overrides(overrides)
        return draft

    # ---------------------------- Overrides ----------------------------

    def apply_overrides(self, args: ArgsLike) -> MutableExportConfig:
        """Apply CLI/API overrides (in place).

        Keys match the `ExportConfig` field names; ``None`` values inherit.
        ``class_reference`` accepts a member or its string value and ``indent``
        accepts a number of spaces.

        Args:
            args (ArgsLike): Override mapping.

        Returns:
            MutableExportConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a key is unknown or a value cannot be coerced.
        """
        names = {f.name for f in fields(self)}
        for key, value in args.items():
            if value is None:
                continue
            if key not in names:
                raise ConfigError(f"Unknown config override: {key}")
            if key == Toml.KEY_INDENT:
                value = _get_indent({key: value}, key, "overrides")
            elif key == Toml.KEY_CLASS_REFERENCE and not isinstance(value, ClassReferenceStyle):
                value = _get_class_reference({key: value}, key, "overrides")
            setattr(self, key, value)
        return self


# ------------------ Checked getters ------------------


def _get_bool(table: TomlTable, key: str, source: str) -> bool | None:
    value = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"{source}: '{key}' must be a boolean, got {value!r}")


def _get_int(table: TomlTable, key: str, source: str) -> int | None:
    value = table.get(key)
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    raise ConfigError(f"{source}: '{key}' must be an integer, got {value!r}")


def _get_str(table: TomlTable, key: str, source: str) -> str | None:
    value = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"{source}: '{key}' must be a string, got {value!r}")


def _get_indent(table: TomlTable, key: str, source: str) -> str | None:
    """Read an indent unit given either as a number of spaces or as a string."""
    value = table.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value <= 0:
            raise ConfigError(f"{source}: '{key}' must be a positive number of spaces")
        return " " * value
    raise ConfigError(f"{source}: '{key}' must be a string or a number of spaces, got {value!r}")


def _get_class_reference(table: TomlTable, key: str, source: str) -> ClassReferenceStyle | None:
    value = _get_str(table, key, source)
    if value is None:
        return None
    style = ClassReferenceStyle.from_name(value)
    if style is None:
        choices = ", ".join(s.value for s in ClassReferenceStyle)
        raise ConfigError(f"{source}: '{key}' must be one of {choices}, got {value!r}")
    return style
