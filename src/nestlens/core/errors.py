from __future__ import annotations

from typing import Any


class LensError(Exception):
    """Base exception for this project."""


class TypeMismatchError(LensError, TypeError):
    """Raised when an optic is applied to data of an incompatible shape."""

    def __init__(self, message: str, *, key: Any = None, expected: str | None = None, actual: Any = None):
        super().__init__(message)
        self.key = key
        self.expected = expected
        self.actual = actual

    @classmethod
    def for_value(cls, value: Any, *, key: Any, expected: str) -> "TypeMismatchError":
        actual = type(value).__name__
        return cls(
            f"cannot focus {key!r}: expected {expected}, got {actual}",
            key=key,
            expected=expected,
            actual=actual,
        )


class IndexOutOfRangeError(LensError, IndexError):
    """Raised when setting past the end of a sequence under the fail policy."""

    def __init__(self, index: int, length: int):
        super().__init__(f"index {index} out of range for sequence of length {length}")
        self.index = index
        self.length = length


class ConfigError(LensError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
