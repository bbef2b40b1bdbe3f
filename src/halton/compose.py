from __future__ import annotations
from itertools import islice
from typing import Callable, Iterable, List, Optional, Tuple, Union

from .bounds import advance_target, check_count
from .params import DEFAULT_BOUNDS, IndexBounds
from .sequence import Sequence, State
from .utils.log import _log

Item = Union[float, Tuple[float, ...]]


class Composer:
    """Lockstep iterator over one :class:`Sequence` per base.

    Yields a float for a single base and a tuple (in base order) otherwise.
    The k-th item holds the values at index k of every axis. To restart,
    build a new composer.
    """

    __slots__ = ("_axes",)

    def __init__(self, bases: Iterable[int], *, bounds: IndexBounds = DEFAULT_BOUNDS) -> None:
        axes = tuple(Sequence(b, bounds=bounds) for b in bases)
        if not axes:
            raise TypeError("at least one base is required")
        self._axes = axes
        _log(f"composer over bases {self.bases}")

    @property
    def bases(self) -> Tuple[int, ...]:
        return tuple(a.base for a in self._axes)

    @property
    def dims(self) -> int:
        return len(self._axes)

    @property
    def index(self) -> int:
        return self._axes[0].index

    def remaining(self) -> Optional[int]:
        # axes share bounds and move in lockstep, so every axis reports the same
        return self._axes[0].remaining()

    def skip(self, n: int) -> None:
        """Skip every axis by ``n``; either all axes move or none does."""
        n = check_count(n, "n")
        lead = self._axes[0]
        advance_target(lead.base, lead.index, n, lead.bounds)
        for axis in self._axes:
            axis.skip(n)

    def __iter__(self) -> "Composer":
        return self

    def __next__(self) -> Item:
        if self._axes[0].state is State.EXHAUSTED:
            raise StopIteration
        values = tuple(axis.next() for axis in self._axes)
        if len(values) == 1:
            return values[0]
        return values

    def take(self, k: int) -> List[Item]:
        """Next ``k`` items (fewer only if the sequence ends first)."""
        return list(islice(self, check_count(k, "k")))

    def for_each(self, fn: Callable[..., object], limit: Optional[int] = None) -> int:
        """Call ``fn(x)`` or ``fn(x, y, ...)`` per item; return how many were produced."""
        items = self if limit is None else islice(self, check_count(limit, "limit"))
        count = 0
        single = len(self._axes) == 1
        for item in items:
            if single:
                fn(item)
            else:
                fn(*item)
            count += 1
        return count

    def __repr__(self) -> str:
        return f"Composer(bases={self.bases}, index={self.index})"


__all__ = ["Composer"]
