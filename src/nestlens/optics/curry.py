from __future__ import annotations

import functools
import inspect
from typing import Any, Callable


class Curried:
    """A function that collects positional arguments until it has enough.

    Each partial application returns a new `Curried`; nothing is shared
    between them, so a partially applied function can be reused freely.
    """

    def __init__(self, fn: Callable[..., Any], arity: int, bound: tuple[Any, ...] = ()):
        self._fn = fn
        self._arity = arity
        self._bound = bound
        functools.update_wrapper(self, fn)

    @property
    def arity(self) -> int:
        return self._arity - len(self._bound)

    def __call__(self, *args: Any) -> Any:
        if not args:
            return self
        bound = self._bound + args
        if len(bound) >= self._arity:
            return self._fn(*bound)
        return Curried(self._fn, self._arity, bound)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__name__", repr(self._fn))
        return f"<curried {name} awaiting {self.arity} of {self._arity}>"


def _positional_arity(fn: Callable[..., Any]) -> int:
    params = inspect.signature(fn).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def curry(fn: Callable[..., Any]) -> Curried:
    """Curry `fn` over its required positional parameters."""

    return Curried(fn, _positional_arity(fn))
