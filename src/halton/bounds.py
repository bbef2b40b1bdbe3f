"""Index bounds policy shared by sequences and composers.

Every entry point validates its base and index here, so all of them reject
the same inputs with the same errors. Index arithmetic is done on Python ints
and checked against :class:`~halton.params.IndexBounds` before any state is
touched, which is what lets a failed ``skip`` leave a sequence unchanged.
"""

from __future__ import annotations

import operator
from typing import Optional

from .errors import Exhausted, IndexOverflowError, InvalidBaseError
from .params import DEFAULT_BOUNDS, IndexBounds


def _as_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer (got {value!r})")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer (got {value!r})") from None


def check_base(base, bounds: IndexBounds = DEFAULT_BOUNDS) -> int:
    """Return ``base`` as an int, raising InvalidBaseError unless 2 <= base <= max_index."""
    b = _as_int(base, "base")
    if b < 2 or b > bounds.max_index:
        raise InvalidBaseError(b)
    return b


def check_index(index, bounds: IndexBounds = DEFAULT_BOUNDS) -> int:
    i = _as_int(index, "index")
    if i < 0:
        raise ValueError(f"index must be >= 0 (got {i})")
    if i > bounds.max_index:
        raise IndexOverflowError(i, bounds.max_index)
    return i


def check_count(count, name: str = "count") -> int:
    n = _as_int(count, name)
    if n < 0:
        raise ValueError(f"{name} must be >= 0 (got {n})")
    return n


def advance_target(base: int, index: int, n: int, bounds: IndexBounds) -> int:
    """Return ``index + n`` or raise if the counter cannot move there.

    An exhausted counter raises :class:`Exhausted` for any positive ``n``; a
    live counter asked to move past ``max_index`` raises
    :class:`IndexOverflowError`. Landing exactly on ``max_index`` is allowed.
    """
    if n == 0:
        return index
    if index >= bounds.max_index:
        raise Exhausted(base, index)
    target = index + n
    if target > bounds.max_index:
        raise IndexOverflowError(target, bounds.max_index)
    return target


def remaining(index: int, bounds: IndexBounds) -> Optional[int]:
    """Count of further steps before exhaustion, or None if it does not fit count_bits."""
    left = bounds.max_index - index
    if left > bounds.max_count:
        return None
    return left


__all__ = [
    "check_base",
    "check_index",
    "check_count",
    "advance_target",
    "remaining",
]
