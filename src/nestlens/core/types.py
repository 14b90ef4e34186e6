from __future__ import annotations

import enum
from typing import Any, Sequence, Union

PathSegment = Union[str, int]
Path = Sequence[PathSegment]


class Absent:
    """Marker for a focus that does not exist in the data.

    `None` is a legitimate stored value, so missing keys and out-of-range
    indices are reported with the `ABSENT` singleton instead.
    """

    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Absent":
        return self


ABSENT = Absent()


def is_absent(value: Any) -> bool:
    return value is ABSENT


class IndexPolicy(str, enum.Enum):
    """What an index setter does when the index is past the end."""

    PAD = "pad"
    FAIL = "fail"


def is_index_segment(segment: Any) -> bool:
    return isinstance(segment, int) and not isinstance(segment, bool)


def parse_path(text: str) -> list[PathSegment]:
    """Split a dotted path such as ``phones.0.number`` into segments.

    Segments made only of digits (optionally with a leading ``-``) become
    integer indices. An empty string is the empty path.
    """

    if not text:
        return []
    out: list[PathSegment] = []
    for part in text.split("."):
        if not part:
            raise ValueError(f"empty segment in path {text!r}")
        digits = part[1:] if part.startswith("-") else part
        out.append(int(part) if digits.isdigit() else part)
    return out
