# topmark:header:start
#
#   project      : VarExport
#   file         : test_buffer.py
#   file_relpath : tests/exporter/test_buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the line-buffer helpers (`varexport.exporter.buffer`)."""

from __future__ import annotations

from tests.conftest import mark_exporter, parametrize
from varexport.exporter.buffer import (
    append_to_last,
    escape_identifier,
    indent,
    is_bare_identifier,
    prefix_first,
    wrap_in_scope,
)


@mark_exporter
def test_indent_prefixes_every_line() -> None:
    """Each line gets one indentation unit per depth level."""
    assert indent(["a", "b"]) == ["    a", "    b"]
    assert indent(["a"], 2) == ["        a"]
    assert indent(["a"], 1, "\t") == ["\ta"]


@mark_exporter
def test_indent_leaves_blank_lines_empty() -> None:
    """Blank lines never receive trailing whitespace."""
    assert indent(["a", "", "b"]) == ["    a", "", "    b"]


@mark_exporter
def test_indent_returns_new_list() -> None:
    """The input is not modified."""
    lines = ["x"]
    out = indent(lines, 0)
    assert out == ["x"]
    assert out is not lines


@mark_exporter
@parametrize(
    "name",
    ["validName", "snake_case", "_private", "__dunder__", "CONSTANT_2", "ab"],
)
def test_escape_identifier_keeps_bare_names(name: str) -> None:
    """Names made of identifier characters come back unchanged."""
    assert escape_identifier(name) == name
    assert is_bare_identifier(name)


@mark_exporter
@parametrize(
    ("name", "expected"),
    [
        ("has space", "'has space'"),
        ("", "''"),
        ("123start", "'123start'"),
        ("dash-name", "'dash-name'"),
        ("class", "'class'"),
        ("None", "'None'"),
        ("x", "'x'"),
        ("quote'd", '"quote\'d"'),
        ("héllo", "'héllo'"),
    ],
)
def test_escape_identifier_quotes_everything_else(name: str, expected: str) -> None:
    """Keywords, single letters and non-identifier names get the quoted literal."""
    assert escape_identifier(name) == expected
    assert not is_bare_identifier(name)


@mark_exporter
def test_append_and_prefix_do_not_mutate() -> None:
    """Both helpers return copies."""
    lines = ["[", "    1,", "]"]
    assert append_to_last(lines, ",") == ["[", "    1,", "],"]
    assert prefix_first("x = ", lines) == ["x = [", "    1,", "]"]
    assert lines == ["[", "    1,", "]"]


@mark_exporter
def test_wrap_in_scope_builds_lambda_tuple() -> None:
    """The wrapped lines form an immediately invoked lambda returning the last element."""
    lines = wrap_in_scope(["(obj := 41 + 1),", "obj,"])
    assert lines == [
        "(lambda: (",
        "    (obj := 41 + 1),",
        "    obj,",
        ")[-1])()",
    ]
    assert eval("\n".join(lines), {}) == 42  # noqa: S307


@mark_exporter
def test_wrap_in_scope_keeps_names_local() -> None:
    """Names bound inside the scope do not leak into the evaluating namespace."""
    namespace: dict[str, object] = {}
    eval("\n".join(wrap_in_scope(["(obj := 1),", "obj,"])), namespace)  # noqa: S307
    assert "obj" not in namespace
