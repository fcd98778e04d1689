# topmark:header:start
#
#   project      : VarExport
#   file         : types.py
#   file_relpath : src/varexport/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API override dicts.
    - `TomlTable`: plain-dict view of a parsed TOML table.
    - `ClassReferenceStyle`: how generated code refers to classes.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config builders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

TomlTable = dict[str, Any]


class ClassReferenceStyle(str, Enum):
    """How generated code refers to the class of an exported object.

    Members:
        IMPORT: ``__import__('pkg.mod', fromlist=['Cls']).Cls``; the fragment
            needs no imports in the evaluating namespace.
        QUALIFIED: ``pkg.mod.Cls``; the module must be importable by name in
            the evaluating namespace.
        NAME: ``Cls``; the class itself must be in scope.
    """

    IMPORT = "import"
    QUALIFIED = "qualified"
    NAME = "name"

    @classmethod
    def from_name(cls, key_name: str | None) -> ClassReferenceStyle | None:
        """Find the member by its case-insensitive value (e.g., 'import', 'name').

        Args:
            key_name (str | None): The string value of the member or None.

        Returns:
            ClassReferenceStyle | None: The matching member or None
                if the key is None or unmatched.
        """
        if key_name is None:
            return None
        try:
            return cls(key_name.strip().lower())
        except ValueError:
            return None
