from .compose import compose, pipe
from .constructors import assoc, assoc_path, index_optic, path, path_optic, prop, prop_optic, segment_optic
from .curry import Curried, curry
from .operators import over, set_, view
from .optic import Optic, identity_optic, make_optic

__all__ = [
    "Curried",
    "Optic",
    "assoc",
    "assoc_path",
    "compose",
    "curry",
    "identity_optic",
    "index_optic",
    "make_optic",
    "over",
    "path",
    "path_optic",
    "pipe",
    "prop",
    "prop_optic",
    "segment_optic",
    "set_",
    "view",
]
