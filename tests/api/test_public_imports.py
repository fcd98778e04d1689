# topmark:header:start
#
#   project      : VarExport
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The public surface of the `varexport` package."""

from __future__ import annotations

import varexport
from tests.conftest import mark_api


@mark_api
def test_public_names() -> None:
    assert sorted(varexport.__all__) == [
        "ClassReferenceStyle",
        "ConfigError",
        "CyclicReferenceError",
        "ExportConfig",
        "ExportError",
        "MutableExportConfig",
        "UninitializedAttributeError",
        "UnsupportedTypeError",
        "VarExportError",
        "export",
        "export_lines",
    ]
    for name in varexport.__all__:
        assert hasattr(varexport, name)


@mark_api
def test_error_hierarchy() -> None:
    assert issubclass(varexport.UnsupportedTypeError, varexport.ExportError)
    assert issubclass(varexport.CyclicReferenceError, varexport.ExportError)
    assert issubclass(varexport.ExportError, varexport.VarExportError)
    assert issubclass(varexport.ConfigError, varexport.VarExportError)
    assert issubclass(varexport.UninitializedAttributeError, varexport.VarExportError)
