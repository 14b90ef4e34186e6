from __future__ import annotations

from typing import Any, Iterable

from nestlens.core.errors import TypeMismatchError
from nestlens.core.types import IndexPolicy, PathSegment, is_index_segment

from .compose import compose
from .containers import get_index, get_key, with_index, with_key
from .curry import curry
from .optic import Optic


@curry
def prop(name: Any, whole: Any) -> Any:
    """Read `name` from `whole`, or ABSENT when it is not there."""

    return get_key(whole, name)


@curry
def assoc(name: Any, value: Any, whole: Any) -> Any:
    """Return a shallow copy of `whole` with `name` bound to `value`."""

    return with_key(whole, name, value)


def prop_optic(name: str) -> Optic[Any, Any]:
    """Focus on a named key of a mapping, or a field of a record."""

    def getter(whole: Any) -> Any:
        return get_key(whole, name)

    def setter(part: Any, whole: Any) -> Any:
        return with_key(whole, name, part)

    return Optic(getter=getter, setter=setter, label=f"prop({name!r})")


def index_optic(index: int, *, policy: IndexPolicy | str = IndexPolicy.PAD, fill: Any = None) -> Optic[Any, Any]:
    """Focus on position `index` of a sequence.

    Negative indices count from the end. Setting past the end pads with
    `fill` under ``IndexPolicy.PAD`` and raises `IndexOutOfRangeError` under
    ``IndexPolicy.FAIL``.
    """

    policy = IndexPolicy(policy)

    def checked_index() -> int:
        if not is_index_segment(index):
            raise TypeMismatchError(
                f"index must be an int, got {type(index).__name__}",
                key=index,
                expected="an int index",
                actual=type(index).__name__,
            )
        return index

    def getter(whole: Any) -> Any:
        return get_index(whole, checked_index())

    def setter(part: Any, whole: Any) -> Any:
        return with_index(whole, checked_index(), part, policy=policy, fill=fill)

    return Optic(getter=getter, setter=setter, label=f"index({index})")


def segment_optic(
    segment: PathSegment, *, policy: IndexPolicy | str = IndexPolicy.PAD, fill: Any = None
) -> Optic[Any, Any]:
    if is_index_segment(segment):
        return index_optic(segment, policy=policy, fill=fill)  # type: ignore[arg-type]
    return prop_optic(segment)  # type: ignore[arg-type]


def path_optic(
    segments: Iterable[PathSegment], *, policy: IndexPolicy | str = IndexPolicy.PAD, fill: Any = None
) -> Optic[Any, Any]:
    """Focus on a nested value, one segment per level.

    Integer segments become index optics, anything else a prop optic.
    """

    return compose(*(segment_optic(s, policy=policy, fill=fill) for s in segments))


@curry
def path(segments: Iterable[PathSegment], whole: Any) -> Any:
    return path_optic(segments).getter(whole)


@curry
def assoc_path(segments: Iterable[PathSegment], value: Any, whole: Any) -> Any:
    return path_optic(segments).setter(value, whole)
