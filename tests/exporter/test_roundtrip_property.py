# topmark:header:start
#
#   project      : VarExport
#   file         : test_roundtrip_property.py
#   file_relpath : tests/exporter/test_roundtrip_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests: evaluating the exported source rebuilds an equal value."""

from __future__ import annotations

from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from tests.conftest import evaluate, make_config, mark_exporter, mark_hypothesis_slow
from tests.sample_models import Point
from varexport import export

scalars: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**80), max_value=2**80),
    st.floats(allow_nan=False),
    st.complex_numbers(allow_nan=False),
    st.text(),
    st.binary(max_size=16),
)

hashables: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=8),
    st.tuples(st.integers(), st.text(max_size=4)),
)


def _containers(children: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(
        st.lists(children, max_size=4),
        st.lists(children, max_size=4).map(tuple),
        st.dictionaries(hashables, children, max_size=4),
        st.sets(hashables, max_size=4),
        st.frozensets(hashables, max_size=4),
        st.builds(Point, children, children),
    )


values: st.SearchStrategy[Any] = st.recursive(scalars, _containers, max_leaves=20)

configs = st.builds(
    make_config,
    trailing_comma=st.booleans(),
    inline_scalar_lists=st.booleans(),
    add_type_hints=st.booleans(),
    indent=st.sampled_from([1, 2, 4, "\t"]),
)


def _same(a: Any, b: Any) -> bool:
    """Equality that also tells apart ``True``/``1`` and ``list``/``tuple``."""
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return list(a) == list(b) and all(_same(a[k], b[k]) for k in a)
    if isinstance(a, Point):
        return _same(vars(a), vars(b))
    return bool(a == b)


@mark_exporter
@settings(max_examples=150, deadline=None, suppress_health_check=[HealthCheck.too_slow])
@given(value=values, config=configs)
def test_export_round_trips(value: Any, config: Any) -> None:
    source = export(value, config)
    assert _same(evaluate(source), value)
    assert export(value, config) == source


@mark_hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(value=values)
def test_export_round_trips_exhaustive(value: Any) -> None:
    source = export(value)
    assert _same(evaluate(source), value)
    assert export(value) == source
