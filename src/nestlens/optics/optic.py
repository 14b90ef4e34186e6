"""The getter/setter pair at the heart of every lens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

S = TypeVar("S")  # whole
A = TypeVar("A")  # focused part

Getter = Callable[[S], A]
Setter = Callable[[A, S], S]


@dataclass(frozen=True, slots=True)
class Optic(Generic[S, A]):
    """Focus on one part of a larger immutable structure.

    `getter(whole)` returns the focused part and `setter(part, whole)` returns
    a new whole with that part replaced. Neither is called until the optic is
    applied to data, and the setter must never mutate `whole`.

    `parts` is non-empty only for optics built by `compose`; it lists the
    chain so that nested compositions can be flattened.
    """

    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], Any]
    parts: tuple["Optic[Any, Any]", ...] = ()
    label: str = "optic"

    def view(self, whole: S) -> A:
        return self.getter(whole)

    def set(self, part: A, whole: S) -> S:  # noqa: A003
        return self.setter(part, whole)

    def over(self, fn: Callable[[A], A], whole: S) -> S:
        return self.setter(fn(self.getter(whole)), whole)

    def compose(self, *others: "Optic[Any, Any]") -> "Optic[S, Any]":
        from .compose import compose

        return compose(self, *others)

    def chain(self) -> tuple["Optic[Any, Any]", ...]:
        return self.parts or (self,)

    def __repr__(self) -> str:
        return f"Optic({self.label})"


def make_optic(getter: Getter[S, A], setter: Setter[A, S], *, label: str | None = None) -> Optic[S, A]:
    """Pair a getter and a setter into an optic.

    No validation is done here; the functions are trusted to be pure.
    """

    name = label or getattr(getter, "__name__", None) or "optic"
    return Optic(getter=getter, setter=setter, label=name)


def identity_optic() -> Optic[Any, Any]:
    """The optic that focuses on the whole value."""

    return Optic(getter=_identity_get, setter=_identity_set, label="identity")


def _identity_get(whole: Any) -> Any:
    return whole


def _identity_set(part: Any, whole: Any) -> Any:
    return part
