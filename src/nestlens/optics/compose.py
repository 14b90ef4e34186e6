from __future__ import annotations

from typing import Any, Callable

from .optic import Optic, identity_optic


def compose(*optics: Optic[Any, Any]) -> Optic[Any, Any]:
    """Chain optics so the part focused by one is the whole for the next.

    ``compose(a, b, c)`` views ``c`` inside ``b`` inside ``a``. Setting reads
    each intermediate whole on the way down, replaces the innermost part, then
    rebuilds every enclosing level from the inside out. Composite arguments
    are flattened into one chain, which makes composition associative.
    """

    chain: tuple[Optic[Any, Any], ...] = tuple(p for o in optics for p in o.chain())
    if not chain:
        return identity_optic()
    if len(chain) == 1:
        return chain[0]

    def getter(whole: Any) -> Any:
        for optic in chain:
            whole = optic.getter(whole)
        return whole

    def setter(part: Any, whole: Any) -> Any:
        wholes = [whole]
        for optic in chain[:-1]:
            wholes.append(optic.getter(wholes[-1]))
        for optic, outer in zip(reversed(chain), reversed(wholes)):
            part = optic.setter(part, outer)
        return part

    label = " . ".join(o.label for o in chain)
    return Optic(getter=getter, setter=setter, parts=chain, label=label)


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right function composition: ``pipe(f, g)(x) == g(f(x))``."""

    def piped(value: Any) -> Any:
        for fn in fns:
            value = fn(value)
        return value

    return piped
