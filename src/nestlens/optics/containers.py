"""Container capability used by the optic constructors.

Every supported container type provides two operations per kind of focus:
read a key (or index), and return a copy with that key replaced. Unsupported
values raise `TypeMismatchError`; an absent or ``None`` whole reads as ABSENT
and is replaced by a fresh container when written to.
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping, Sequence
from functools import singledispatch
from typing import Any

from pydantic import BaseModel

from nestlens.core.errors import IndexOutOfRangeError, TypeMismatchError
from nestlens.core.types import ABSENT, Absent, IndexPolicy
from nestlens.observability.logging import get_logger

_log = get_logger("nestlens.containers")


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, "_fields") and hasattr(value, "_replace")


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


# --- keyed access -----------------------------------------------------------


@singledispatch
def get_key(whole: Any, key: Any) -> Any:
    if _is_dataclass_instance(whole):
        names = {f.name for f in dataclasses.fields(whole)}
        return getattr(whole, key) if key in names else ABSENT
    raise TypeMismatchError.for_value(whole, key=key, expected="a mapping or record")


@get_key.register(Absent)
@get_key.register(type(None))
def _get_key_missing(whole: Any, key: Any) -> Any:
    return ABSENT


@get_key.register(Mapping)
def _get_key_mapping(whole: Mapping[Any, Any], key: Any) -> Any:
    return whole[key] if key in whole else ABSENT


@get_key.register(tuple)
def _get_key_tuple(whole: tuple[Any, ...], key: Any) -> Any:
    if not _is_namedtuple(whole):
        raise TypeMismatchError.for_value(whole, key=key, expected="a mapping or record")
    return getattr(whole, key) if key in whole._fields else ABSENT  # type: ignore[attr-defined]


@get_key.register(BaseModel)
def _get_key_model(whole: BaseModel, key: Any) -> Any:
    return getattr(whole, key) if key in type(whole).model_fields else ABSENT


@singledispatch
def with_key(whole: Any, key: Any, value: Any) -> Any:
    if _is_dataclass_instance(whole):
        names = {f.name for f in dataclasses.fields(whole)}
        if key not in names or value is ABSENT:
            raise TypeMismatchError.for_value(whole, key=key, expected=f"a record with field {key!r}")
        return dataclasses.replace(whole, **{key: value})
    raise TypeMismatchError.for_value(whole, key=key, expected="a mapping or record")


@with_key.register(Absent)
@with_key.register(type(None))
def _with_key_missing(whole: Any, key: Any, value: Any) -> Any:
    if value is ABSENT:
        return whole
    return {key: value}


@with_key.register(Mapping)
def _with_key_mapping(whole: Mapping[Any, Any], key: Any, value: Any) -> Any:
    # Other mapping types may share internal state with their shallow copies.
    out = copy.copy(whole) if isinstance(whole, dict) else dict(whole)
    if value is ABSENT:
        out.pop(key, None)
    else:
        # Rebinding an existing key keeps its position.
        out[key] = value
    return out


@with_key.register(tuple)
def _with_key_tuple(whole: tuple[Any, ...], key: Any, value: Any) -> Any:
    if not _is_namedtuple(whole):
        raise TypeMismatchError.for_value(whole, key=key, expected="a mapping or record")
    if key not in whole._fields or value is ABSENT:  # type: ignore[attr-defined]
        raise TypeMismatchError.for_value(whole, key=key, expected=f"a record with field {key!r}")
    return whole._replace(**{key: value})  # type: ignore[attr-defined]


@with_key.register(BaseModel)
def _with_key_model(whole: BaseModel, key: Any, value: Any) -> Any:
    if key not in type(whole).model_fields or value is ABSENT:
        raise TypeMismatchError.for_value(whole, key=key, expected=f"a model with field {key!r}")
    return whole.model_copy(update={key: value})


# --- indexed access ---------------------------------------------------------


@singledispatch
def get_index(whole: Any, index: int) -> Any:
    raise TypeMismatchError.for_value(whole, key=index, expected="a sequence")


@get_index.register(Absent)
@get_index.register(type(None))
def _get_index_missing(whole: Any, index: int) -> Any:
    return ABSENT


@get_index.register(str)
@get_index.register(bytes)
@get_index.register(bytearray)
def _get_index_text(whole: Any, index: int) -> Any:
    raise TypeMismatchError.for_value(whole, key=index, expected="a sequence")


@get_index.register(Sequence)
def _get_index_sequence(whole: Sequence[Any], index: int) -> Any:
    if -len(whole) <= index < len(whole):
        return whole[index]
    return ABSENT


@get_index.register(Mapping)
def _get_index_mapping(whole: Mapping[Any, Any], index: int) -> Any:
    return _get_key_mapping(whole, index)


def _rebuild(whole: Sequence[Any], items: list[Any]) -> Sequence[Any]:
    if _is_namedtuple(whole):
        if len(items) != len(whole):
            raise IndexOutOfRangeError(len(items) - 1, len(whole))
        return whole._make(items)  # type: ignore[attr-defined]
    if isinstance(whole, (list, tuple)):
        return type(whole)(items)
    return items


def _pad(items: list[Any], index: int, value: Any, *, policy: IndexPolicy, fill: Any) -> list[Any]:
    length = len(items)
    if policy is IndexPolicy.FAIL:
        raise IndexOutOfRangeError(index, length)
    _log.debug("index_padded", index=index, length=length)
    return items + [fill] * (index - length) + [value]


@singledispatch
def with_index(whole: Any, index: int, value: Any, *, policy: IndexPolicy = IndexPolicy.PAD, fill: Any = None) -> Any:
    raise TypeMismatchError.for_value(whole, key=index, expected="a sequence")


@with_index.register(Absent)
@with_index.register(type(None))
def _with_index_missing(
    whole: Any, index: int, value: Any, *, policy: IndexPolicy = IndexPolicy.PAD, fill: Any = None
) -> Any:
    if value is ABSENT:
        return whole
    if index < 0:
        raise IndexOutOfRangeError(index, 0)
    return _pad([], index, value, policy=policy, fill=fill)


@with_index.register(str)
@with_index.register(bytes)
@with_index.register(bytearray)
def _with_index_text(
    whole: Any, index: int, value: Any, *, policy: IndexPolicy = IndexPolicy.PAD, fill: Any = None
) -> Any:
    raise TypeMismatchError.for_value(whole, key=index, expected="a sequence")


@with_index.register(Sequence)
def _with_index_sequence(
    whole: Sequence[Any], index: int, value: Any, *, policy: IndexPolicy = IndexPolicy.PAD, fill: Any = None
) -> Any:
    length = len(whole)
    if -length <= index < length:
        items = list(whole)
        items[index] = fill if value is ABSENT else value
        return _rebuild(whole, items)
    if value is ABSENT:
        return whole
    if index < 0:
        raise IndexOutOfRangeError(index, length)
    if _is_namedtuple(whole):
        raise IndexOutOfRangeError(index, length)
    return _rebuild(whole, _pad(list(whole), index, value, policy=policy, fill=fill))


@with_index.register(Mapping)
def _with_index_mapping(
    whole: Mapping[Any, Any], index: int, value: Any, *, policy: IndexPolicy = IndexPolicy.PAD, fill: Any = None
) -> Any:
    return _with_key_mapping(whole, index, value)
