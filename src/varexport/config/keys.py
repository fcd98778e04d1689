# topmark:header:start
#
#   project      : VarExport
#   file         : keys.py
#   file_relpath : src/varexport/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for VarExport configuration.

Keys defined here are the *external configuration API* as it appears in
``varexport.toml`` and in ``[tool.varexport]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by VarExport configuration.

    The ordering mirrors the fields of
    [`ExportConfig`][varexport.config.model.ExportConfig].
    """

    KEY_ADD_TYPE_HINTS: Final[str] = "add_type_hints"
    KEY_INDENT: Final[str] = "indent"
    KEY_INDENT_LEVEL: Final[str] = "indent_level"
    KEY_INLINE_SCALAR_LISTS: Final[str] = "inline_scalar_lists"
    KEY_TRAILING_COMMA: Final[str] = "trailing_comma"
    KEY_CLASS_REFERENCE: Final[str] = "class_reference"
    KEY_USE_STATE_PROTOCOL: Final[str] = "use_state_protocol"
    KEY_SKIP_DYNAMIC_ATTRIBUTES: Final[str] = "skip_dynamic_attributes"
    KEY_PUBLIC_ONLY: Final[str] = "public_only"
    KEY_ASSIGN_TO: Final[str] = "assign_to"

    @classmethod
    def all_keys(cls) -> tuple[str, ...]:
        """Return every recognized key, in declaration order."""
        return tuple(
            value
            for name, value in vars(cls).items()
            if name.startswith("KEY_") and isinstance(value, str)
        )
