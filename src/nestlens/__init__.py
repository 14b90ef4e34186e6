"""Composable lenses for immutable nested data.

    >>> from nestlens import path_optic, set_, view
    >>> phone = path_optic(["phones", 0, "number"])
    >>> view(phone, {"phones": [{"number": "111"}]})
    '111'
    >>> set_(phone, "222")({"phones": [{"number": "111"}]})
    {'phones': [{'number': '222'}]}
"""

from __future__ import annotations

from nestlens.core import __version__
from nestlens.core.errors import ConfigError, IndexOutOfRangeError, LensError, TypeMismatchError
from nestlens.core.types import ABSENT, Absent, IndexPolicy, PathSegment, is_absent, parse_path
from nestlens.optics import (
    Optic,
    assoc,
    assoc_path,
    compose,
    identity_optic,
    index_optic,
    make_optic,
    over,
    path,
    path_optic,
    pipe,
    prop,
    prop_optic,
    set_,
    view,
)

__all__ = [
    "ABSENT",
    "Absent",
    "ConfigError",
    "IndexOutOfRangeError",
    "IndexPolicy",
    "LensError",
    "Optic",
    "PathSegment",
    "TypeMismatchError",
    "__version__",
    "assoc",
    "assoc_path",
    "compose",
    "identity_optic",
    "index_optic",
    "is_absent",
    "make_optic",
    "over",
    "parse_path",
    "path",
    "path_optic",
    "pipe",
    "prop",
    "prop_optic",
    "set_",
    "view",
]
