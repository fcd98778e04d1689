# topmark:header:start
#
#   project      : VarExport
#   file         : test_engine.py
#   file_relpath : tests/exporter/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the generic export engine: literals, collections, options and errors."""

from __future__ import annotations

import array
import functools
import math
import re
import threading
from typing import Any

import pytest

from tests.conftest import evaluate, make_config, mark_exporter, parametrize
from tests.sample_models import Holder, LockBox, Node, Point
from varexport import export, export_lines
from varexport.errors import CyclicReferenceError, ExportError, UnsupportedTypeError
from varexport.exporter.engine import GenericExporter, finalize

# ---------------------------- Scalars ----------------------------


@mark_exporter
def test_scenario_integer() -> None:
    assert export(42) == "42"


@mark_exporter
@parametrize(
    ("value", "expected"),
    [
        (None, "None"),
        (True, "True"),
        (False, "False"),
        (-7, "-7"),
        (1.5, "1.5"),
        (-0.0, "-0.0"),
        (1e100, "1e+100"),
        (2j, "2j"),
        ("it's", '"it\'s"'),
        ("line\nbreak", "'line\\nbreak'"),
        (b"\x00ab", "b'\\x00ab'"),
    ],
)
def test_scalars_use_their_literal(value: Any, expected: str) -> None:
    source = export(value)
    assert source == expected
    assert evaluate(source) == value


@mark_exporter
@parametrize(
    ("value", "expected"),
    [
        (math.inf, "float('inf')"),
        (-math.inf, "-float('inf')"),
        (complex(math.inf, 1), "complex(float('inf'), 1.0)"),
    ],
)
def test_non_finite_numbers(value: Any, expected: str) -> None:
    """Numbers without a literal form are rebuilt through their constructor."""
    source = export(value)
    assert source == expected
    assert evaluate(source) == value


@mark_exporter
def test_nan() -> None:
    source = export(math.nan)
    assert source == "float('nan')"
    assert math.isnan(evaluate(source))


# ---------------------------- Collections ----------------------------


@mark_exporter
def test_scenario_list() -> None:
    assert export([1, 2, 3]) == "[\n    1,\n    2,\n    3,\n]"


@mark_exporter
def test_scenario_dict() -> None:
    """Entries render as ``key: value`` in insertion order."""
    assert export({"a": 1, "b": 2}).splitlines() == ["{", "    'a': 1,", "    'b': 2,", "}"]


@mark_exporter
@parametrize(
    ("value", "expected"),
    [
        ([], "[]"),
        ((), "()"),
        ({}, "{}"),
        (set(), "set()"),
        (frozenset(), "frozenset()"),
        ({1}, "{\n    1,\n}"),
        (frozenset({"a"}), "frozenset({\n    'a',\n})"),
        ((1, 2), "(\n    1,\n    2,\n)"),
    ],
)
def test_collection_forms(value: Any, expected: str) -> None:
    source = export(value)
    assert source == expected
    rebuilt = evaluate(source)
    assert type(rebuilt) is type(value)
    assert rebuilt == value


@mark_exporter
def test_nested_collections_indent_one_unit_per_level() -> None:
    source = export({"a": [1, (2,)]})
    assert source.splitlines() == [
        "{",
        "    'a': [",
        "        1,",
        "        (",
        "            2,",
        "        ),",
        "    ],",
        "}",
    ]


@mark_exporter
def test_multiline_dict_keys() -> None:
    """Keys spanning several lines are joined to their value on the last key line."""
    value = {(1, 2): "v"}
    source = export(value)
    assert "    ): 'v'," in source.splitlines()
    assert evaluate(source) == value


@mark_exporter
def test_no_trailing_comma() -> None:
    config = make_config(trailing_comma=False)
    assert export([1, 2], config) == "[\n    1,\n    2\n]"
    assert export({"a": 1}, config) == "{\n    'a': 1\n}"


@mark_exporter
def test_one_element_tuple_keeps_its_comma() -> None:
    config = make_config(trailing_comma=False)
    source = export((1,), config)
    assert source == "(\n    1,\n)"
    assert evaluate(source) == (1,)


@mark_exporter
def test_inline_scalar_lists() -> None:
    config = make_config(inline_scalar_lists=True)
    assert export([1, "a", None], config) == "[1, 'a', None]"
    assert export((1,), config) == "(1,)"
    assert export({"k": (1, 2)}, config) == "{\n    'k': (1, 2),\n}"
    # Only lists and tuples made of scalars are inlined
    assert export([[1]], config) == "[\n    [1],\n]"
    assert export({1}, config) == "{\n    1,\n}"


@mark_exporter
def test_custom_indent_unit() -> None:
    assert export([1], make_config(indent=2)) == "[\n  1,\n]"
    assert export([1], make_config(indent="\t")) == "[\n\t1,\n]"


@mark_exporter
def test_indent_level_and_assignment() -> None:
    """Top-level options apply to the finished fragment."""
    lines = export_lines([1], make_config(indent_level=1, assign_to="value"))
    assert lines == ["value = [", "        1,", "    ]"]


@mark_exporter
def test_finalize_without_options_is_identity() -> None:
    assert finalize(["[", "    1,", "]"], make_config()) == ["[", "    1,", "]"]


@mark_exporter
def test_output_is_deterministic() -> None:
    value = {"points": [Point(1, 2), Point(3, (4, 5))], "name": "x"}
    assert export(value) == export(value)


@mark_exporter
def test_shared_references_are_not_cycles() -> None:
    """The same value may appear several times, as long as it does not contain itself."""
    shared = [1]
    rebuilt = evaluate(export([shared, {"again": shared}, Holder(shared)]))
    assert rebuilt[0] == rebuilt[1]["again"] == rebuilt[2].payload == [1]


@mark_exporter
def test_subclasses_of_builtin_scalars_are_not_literals() -> None:
    """Literal handling uses exact types."""

    class MyInt(int):
        pass

    with pytest.raises(UnsupportedTypeError):
        export(MyInt(1))


# ---------------------------- Errors ----------------------------


@mark_exporter
def test_opaque_top_level_value() -> None:
    with pytest.raises(UnsupportedTypeError) as info:
        export(threading.Lock())
    assert info.value.path == ""
    assert str(info.value) == 'Type "_thread.lock" is internal, and cannot be exported.'


@mark_exporter
def test_opaque_value_in_collection_reports_path() -> None:
    with pytest.raises(UnsupportedTypeError) as info:
        export({"items": [1, len]})
    assert info.value.path == "['items'][1]"
    assert str(info.value).startswith("At path ['items'][1]: ")
    assert "is internal" in info.value.reason


@mark_exporter
def test_opaque_attribute_reports_path() -> None:
    with pytest.raises(UnsupportedTypeError) as info:
        export([LockBox()])
    assert info.value.path == "[0].lock"


@mark_exporter
@parametrize(
    "value",
    [
        threading.RLock(),
        re.compile("[a-z]+"),
        functools.partial(int, base=2),
        array.array("d", [1.5]),
    ],
)
def test_extension_heap_types_are_rejected(value: Any) -> None:
    with pytest.raises(UnsupportedTypeError) as info:
        export({"value": value})
    assert info.value.path == "['value']"


@mark_exporter
def test_opaque_value_deep_inside_objects() -> None:
    with pytest.raises(UnsupportedTypeError) as info:
        export(Holder(Holder({"fn": lambda: None})))
    assert info.value.path == ".payload.payload['fn']"


@mark_exporter
@parametrize("kind", ["list", "dict"])
def test_self_containing_collection(kind: str) -> None:
    value: Any
    if kind == "list":
        value = []
        value.append(value)
        expected_path = "[0]"
    else:
        value = {}
        value["self"] = value
        expected_path = "['self']"
    with pytest.raises(CyclicReferenceError) as info:
        export(value)
    assert info.value.path == expected_path


@mark_exporter
def test_object_cycle() -> None:
    root = Node("root")
    child = Node("child", parent=root)
    root.children.append(child)
    with pytest.raises(CyclicReferenceError) as info:
        export(root)
    assert info.value.path == ".children[0].parent"
    assert isinstance(info.value, ExportError)


@mark_exporter
def test_exporter_recovers_after_error() -> None:
    """A failed export leaves no state behind in the exporter."""
    exporter = GenericExporter(make_config())
    with pytest.raises(UnsupportedTypeError):
        exporter.export([len])
    assert exporter.path == ""
    assert exporter.export([1]) == ["[", "    1,", "]"]
