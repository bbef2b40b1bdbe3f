from __future__ import annotations

"""Utility subpackage exports.

The numba kernels in :mod:`halton.utils.radix` compile on first call; the
public wrappers that validate their arguments live in :mod:`halton.main`.
"""

from .radix import ladder, MAX_LEVELS  # noqa: F401
from .log import logger  # noqa: F401

__all__ = [
    "ladder",
    "MAX_LEVELS",
    "logger",
]
