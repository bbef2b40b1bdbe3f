from __future__ import annotations
from typing import List, Tuple
import numpy as np
import numba as nb

# base 2 needs 64 digits for the largest 64-bit index; one spare level
MAX_LEVELS = 65


@nb.njit(cache=True)
def _number(base, index):
    """Return the Halton value at ``index`` for ``base`` (uint64 arguments)."""
    f = 1.0
    r = 0.0
    i = index
    while i:
        f /= base
        r += f * (i % base)
        i //= base
    return r


@nb.njit(cache=True)
def _fill_sequence(base, first, out):
    """Write the values at indices ``first, first + 1, ...`` into ``out``.

    Runs the same digit ladder as :class:`halton.Sequence`: one digit and one
    weight per level, plus the sum of all higher levels so each value is
    re-derived from the digits instead of accumulated.
    """
    n = out.shape[0]
    if n == 0:
        return
    one = np.uint64(1)
    zero = np.uint64(0)
    digits = np.zeros(MAX_LEVELS, np.uint64)
    weights = np.zeros(MAX_LEVELS, np.float64)
    above = np.zeros(MAX_LEVELS, np.float64)

    levels = 0
    f = 1.0
    i = first
    while i:
        f /= base
        digits[levels] = i % base
        weights[levels] = f
        levels += 1
        i //= base
    if levels == 0:
        weights[0] = 1.0 / base
        levels = 1
    for l in range(levels - 2, -1, -1):
        above[l] = above[l + 1] + digits[l + 1] * weights[l + 1]
    out[0] = above[0] + digits[0] * weights[0]

    for k in range(1, n):
        digits[0] += one
        if digits[0] < base:
            out[k] = above[0] + digits[0] * weights[0]
            continue
        l = 0
        while digits[l] == base:
            digits[l] = zero
            l += 1
            if l == levels:
                weights[l] = weights[l - 1] / base
                above[l] = 0.0
                levels += 1
            digits[l] += one
        s = above[l] + digits[l] * weights[l]
        for j in range(l):
            above[j] = s
        out[k] = s


@nb.njit(cache=True)
def _jitter_grid(samples, base_u, base_v, shift_u, shift_v):
    """Stratified samples * samples grid jittered by a 2-D Halton sequence."""
    g = samples
    cells = g * g
    u = np.empty(cells, np.float64)
    v = np.empty(cells, np.float64)
    for c in range(cells):
        i, j = divmod(c, g)
        q = np.uint64(c + 1)
        u[c] = ((_number(base_u, q) + shift_u) % 1.0 + i) / g
        v[c] = ((_number(base_v, q) + shift_v) % 1.0 + j) / g
    return u, v


def ladder(base: int, index: int) -> Tuple[List[int], List[float]]:
    """Digits of ``index`` in ``base`` (least significant first) and their weights.

    Weights are ``base**-(k+1)`` built by repeated division, exactly as
    :func:`_number` builds its factors. Index 0 yields a single zero digit so
    the ladder always has a bottom rung.
    """
    digits: List[int] = []
    weights: List[float] = []
    f = 1.0
    i = index
    while i:
        f /= base
        i, d = divmod(i, base)
        digits.append(d)
        weights.append(f)
    if not digits:
        digits.append(0)
        weights.append(1.0 / base)
    return digits, weights


__all__ = ["ladder", "MAX_LEVELS"]
