"""Lens laws checked over generated documents and every supported container."""

from __future__ import annotations

import copy
from collections import OrderedDict
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, NamedTuple

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from nestlens import Optic, compose, index_optic, over, path_optic, prop_optic, set_, view

keys = st.sampled_from(["a", "b", "c"])
scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=5)
values = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=3) | st.dictionaries(keys, children, max_size=3),
    max_leaves=8,
)
# Shape: {key: {key: [value, ...]}}
documents = st.dictionaries(keys, st.dictionaries(keys, st.lists(values, max_size=3), max_size=3), max_size=3)
paths = st.tuples(keys, keys, st.integers(min_value=0, max_value=4))


@given(doc=documents, segs=paths, value=values)
def test_set_does_not_mutate_input(doc: dict[str, Any], segs: tuple[str, str, int], value: Any) -> None:
    before = copy.deepcopy(doc)
    set_(path_optic(segs), value, doc)
    assert doc == before


@given(doc=documents, segs=paths, value=values)
def test_view_after_set_returns_value(doc: dict[str, Any], segs: tuple[str, str, int], value: Any) -> None:
    lens = path_optic(segs)
    assert view(lens, set_(lens, value, doc)) == value


@given(doc=documents, segs=paths)
def test_setting_the_viewed_value_is_a_no_op(doc: dict[str, Any], segs: tuple[str, str, int]) -> None:
    lens = path_optic(segs)
    assert set_(lens, view(lens, doc), doc) == doc


@given(doc=documents, segs=paths, value=values)
def test_composition_is_associative(doc: dict[str, Any], segs: tuple[str, str, int], value: Any) -> None:
    a, b, c = prop_optic(segs[0]), prop_optic(segs[1]), index_optic(segs[2])
    left = compose(compose(a, b), c)
    right = compose(a, compose(b, c))

    assert view(left, doc) == view(right, doc)
    assert set_(left, value, doc) == set_(right, value, doc)


@given(doc=documents, segs=paths)
def test_over_matches_set_of_view(doc: dict[str, Any], segs: tuple[str, str, int]) -> None:
    lens = path_optic(segs)

    def wrap(v: Any) -> list[Any]:
        return [v]

    assert over(lens, wrap, doc) == set_(lens, wrap(view(lens, doc)), doc)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Pair(NamedTuple):
    left: int
    right: int


class Counter(BaseModel):
    count: int = 0


class Shelf(MutableMapping):
    """Mutable mapping whose shallow copies share storage."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


CONTAINERS: list[tuple[str, Callable[[], Any], Optic[Any, Any]]] = [
    ("dict", lambda: {"a": 1, "b": 2}, prop_optic("a")),
    ("ordered_dict", lambda: OrderedDict(a=1, b=2), prop_optic("a")),
    ("mapping_proxy", lambda: MappingProxyType({"a": 1, "b": 2}), prop_optic("a")),
    ("custom_mapping", lambda: Shelf({"a": 1, "b": 2}), prop_optic("a")),
    ("list", lambda: [1, 2], index_optic(0)),
    ("tuple", lambda: (1, 2), index_optic(1)),
    ("namedtuple_field", lambda: Pair(1, 2), prop_optic("left")),
    ("namedtuple_index", lambda: Pair(1, 2), index_optic(1)),
    ("dataclass", lambda: Point(1, 2), prop_optic("x")),
    ("pydantic", lambda: Counter(count=1), prop_optic("count")),
]


@pytest.mark.parametrize(("make", "lens"), [(m, o) for _, m, o in CONTAINERS], ids=[c[0] for c in CONTAINERS])
@given(value=st.integers())
def test_container_laws(make: Callable[[], Any], lens: Optic[Any, Any], value: int) -> None:
    whole = make()

    updated = set_(lens, value, whole)
    assert whole == make()
    assert view(lens, updated) == value
    assert set_(lens, view(lens, whole), whole) == whole
    assert over(lens, str, whole) == set_(lens, str(view(lens, whole)), whole)
