from __future__ import annotations
from typing import Callable, Optional, Sequence as Seq, Tuple, Union
import numpy as np

from .bounds import check_base, check_count, check_index
from .compose import Composer
from .errors import IndexOverflowError
from .params import DEFAULT_BOUNDS, IndexBounds
from .utils.radix import _fill_sequence, _jitter_grid, _number


def number(base: int, index: int, *, bounds: IndexBounds = DEFAULT_BOUNDS) -> float:
    """Return the value at ``index`` of the Halton sequence for ``base``.

    The digits of ``index`` in ``base`` are mirrored about the radix point, so
    ``number(2, 3) == 0.75`` (``11`` -> ``0.11``). ``number(base, 0)`` is 0.0;
    every positive index gives a value in (0, 1).

    :func:`each` and :class:`~halton.Sequence` are faster for consecutive
    indices; this is for single lookups and "leaped" sequences::

        step = 409
        leaped = [number(17, i) for i in range(1, 10 * step, step)]

    Note that indexing ``each(base).take(n)`` is 0-based while ``index`` here
    counts from 1: ``each(2).take(10)[2] == number(2, 3)``.
    """
    b = check_base(base, bounds)
    i = check_index(index, bounds)
    return float(_number(np.uint64(b), np.uint64(i)))


def numbers(
    base: int,
    count: int,
    start: int = 1,
    *,
    bounds: IndexBounds = DEFAULT_BOUNDS,
) -> np.ndarray:
    """Return ``count`` consecutive values starting at index ``start`` as float64."""
    b = check_base(base, bounds)
    n = check_count(count)
    first = check_index(start, bounds)
    last = first + n - 1
    if n and last > bounds.max_index:
        raise IndexOverflowError(last, bounds.max_index)
    out = np.empty(n, np.float64)
    _fill_sequence(np.uint64(b), np.uint64(first), out)
    return out


def points(
    bases: Seq[int],
    count: int,
    start: int = 1,
    *,
    bounds: IndexBounds = DEFAULT_BOUNDS,
) -> np.ndarray:
    """Return a ``(count, len(bases))`` array; row k is the point at index ``start + k``.

    Same values as ``each(*bases).take(count)`` for ``start=1``.
    """
    bs = [check_base(b, bounds) for b in bases]
    if not bs:
        raise ValueError("bases must not be empty")
    n = check_count(count)
    out = np.empty((n, len(bs)), np.float64)
    for d, b in enumerate(bs):
        out[:, d] = numbers(b, n, start, bounds=bounds)
    return out


def jitter_grid(
    samples: int,
    bases: Tuple[int, int] = (2, 3),
    shift: Optional[Tuple[float, float]] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Stratified ``samples x samples`` grid jittered by a 2-D Halton sequence.

    Cell ``c = i * samples + j`` gets ``u = (H(c + 1) + i) / samples`` and
    ``v = (H'(c + 1) + j) / samples``. ``shift`` applies a Cranley-Patterson
    rotation (added modulo 1) to the Halton offsets before stratification.
    """
    g = check_count(samples, "samples")
    if g < 1:
        raise ValueError(f"samples must be >= 1 (got {g})")
    if len(bases) != 2:
        raise ValueError(f"jitter_grid needs exactly two bases (got {len(bases)})")
    bu, bv = (check_base(b) for b in bases)
    su, sv = (0.0, 0.0) if shift is None else (float(shift[0]), float(shift[1]))
    for s in (su, sv):
        if not 0.0 <= s < 1.0:
            raise ValueError(f"shift components must be in [0, 1) (got {s})")
    return _jitter_grid(g, np.uint64(bu), np.uint64(bv), su, sv)


def each(
    base: int,
    *bases: int,
    fn: Optional[Callable[..., object]] = None,
    limit: Optional[int] = None,
    bounds: IndexBounds = DEFAULT_BOUNDS,
) -> Union[Composer, int]:
    """Iterate the Halton sequences for one or more bases in lockstep.

    Without ``fn`` returns a fresh :class:`Composer` yielding floats (one
    base) or tuples (several). With ``fn`` calls ``fn(x)`` / ``fn(x, y, ...)``
    for up to ``limit`` items and returns how many were produced. Values lie
    in (0, 1). Placing 26 labels on a 10x10 grid::

        for (x, y), c in zip(each(2, 3).take(26), string.ascii_uppercase):
            grid[int(y * 10)][int(x * 10)] = c
    """
    composer = Composer((base,) + bases, bounds=bounds)
    if fn is None:
        if limit is not None:
            raise TypeError("limit requires fn; use Composer.take() for a bounded prefix")
        return composer
    return composer.for_each(fn, limit)


__all__ = ["number", "numbers", "points", "jitter_grid", "each"]
