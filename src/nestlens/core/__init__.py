"""Project core.

This package hosts the stable, non-optic building blocks (config, errors,
the absent marker and path types).
"""

from __future__ import annotations

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
