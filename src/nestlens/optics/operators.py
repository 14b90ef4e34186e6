"""Operators that apply an optic to data.

All three are curried, so ``view(optic)`` or ``set_(optic, value)`` return
functions that wait for the data.
"""

from __future__ import annotations

from typing import Any, Callable

from .curry import curry
from .optic import Optic


@curry
def view(optic: Optic[Any, Any], whole: Any) -> Any:
    return optic.getter(whole)


@curry
def set_(optic: Optic[Any, Any], part: Any, whole: Any) -> Any:
    return optic.setter(part, whole)


@curry
def over(optic: Optic[Any, Any], fn: Callable[[Any], Any], whole: Any) -> Any:
    return optic.setter(fn(optic.getter(whole)), whole)
