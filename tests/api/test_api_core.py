# topmark:header:start
#
#   project      : VarExport
#   file         : test_api_core.py
#   file_relpath : tests/api/test_api_core.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API entry points (`varexport.export`, `varexport.export_lines`)."""

from __future__ import annotations

import pytest

import varexport
from tests.conftest import evaluate, make_config, mark_api
from tests.sample_models import LockBox, Point, Settings


@mark_api
def test_export_returns_joined_lines() -> None:
    value = {"point": Point(1, 2)}
    assert varexport.export(value) == "\n".join(varexport.export_lines(value))


@mark_api
def test_default_config_is_used_when_omitted() -> None:
    assert varexport.export([1]) == varexport.export([1], varexport.ExportConfig())


@mark_api
def test_exported_source_embeds_in_a_module() -> None:
    """With ``assign_to`` the output is a statement that can be executed."""
    config = make_config(assign_to="SETTINGS")
    source = varexport.export(Settings("h", tags=["a", "b"]), config)

    namespace: dict[str, object] = {}
    exec(source, namespace)  # noqa: S102

    assert namespace["SETTINGS"] == Settings("h", tags=["a", "b"])


@mark_api
def test_indent_level_embeds_in_indented_code() -> None:
    body = varexport.export([1], make_config(indent_level=1))
    source = f"def build():\n    return {body}\n"

    namespace: dict[str, object] = {}
    exec(source, namespace)  # noqa: S102

    assert namespace["build"]() == [1]  # type: ignore[operator]


@mark_api
def test_errors_share_a_base_class() -> None:
    with pytest.raises(varexport.ExportError) as info:
        varexport.export({"box": LockBox()})
    assert isinstance(info.value, varexport.UnsupportedTypeError)
    assert isinstance(info.value, varexport.VarExportError)
    assert info.value.path == "['box'].lock"


@mark_api
def test_round_trip_of_mixed_value() -> None:
    value = [None, {"k": (1, 2.5)}, {frozenset({"a"})}, Point([1], {"x": None})]
    assert evaluate(varexport.export(value)) == value
