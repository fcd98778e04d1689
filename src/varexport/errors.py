# topmark:header:start
#
#   project      : VarExport
#   file         : errors.py
#   file_relpath : src/varexport/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the VarExport engine and configuration layer.

Usage:
    Export failures are fatal to the current call: the engine raises as soon as
    it meets a value it cannot express as source, and no partial output is
    returned. Catch `ExportError` to handle every export failure at once.

Hierarchy:
    - `VarExportError`
        - `ExportError` (carries the path of the offending value)
            - `UnsupportedTypeError`
            - `CyclicReferenceError`
        - `UninitializedAttributeError`
        - `ConfigError`
"""

from __future__ import annotations


class VarExportError(Exception):
    """Base class for all VarExport errors."""


class ExportError(VarExportError):
    """A value could not be exported.

    Attributes:
        reason (str): Description of the failure, without location.
        path (str): Location of the offending value inside the exported value,
            e.g. ``[0]['items'].owner``; empty for the top-level value.
    """

    def __init__(self, reason: str, *, path: str = "") -> None:
        self.reason = reason
        self.path = path
        super().__init__(f"At path {path}: {reason}" if path else reason)


class UnsupportedTypeError(ExportError):
    """The value is of a type whose state cannot be expressed as source."""


class CyclicReferenceError(ExportError):
    """The value contains itself, directly or through nested values."""


class UninitializedAttributeError(VarExportError):
    """An uninitialized attribute was read.

    Strategies skip uninitialized attributes, so this signals a programming defect.
    """


class ConfigError(VarExportError):
    """Invalid configuration value (from TOML, the CLI, or the API)."""
