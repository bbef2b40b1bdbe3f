"""Incremental Halton generator.

The generator keeps the current index as a base-``b`` odometer ("ladder"),
least significant digit first, following Kolář and O'Shea, "Fast, portable,
and reliable algorithm for the calculation of Halton numbers". Each rung holds
a digit, its weight ``b**-(k+1)`` and the sum contributed by every rung above
it, so a step only touches the rungs a carry passes through and the value is
always rebuilt from digits rather than accumulated.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .bounds import advance_target, check_base, check_count, check_index, remaining
from .errors import Exhausted, IndexOverflowError
from .params import DEFAULT_BOUNDS, STEP_LIMIT, IndexBounds
from .utils.log import _log
from .utils.radix import ladder


class State(enum.Enum):
    FRESH = "fresh"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class Status(enum.Enum):
    OK = "ok"
    EXHAUSTED = "exhausted"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class Outcome:
    """Result of :meth:`Sequence.try_next` / :meth:`Sequence.try_skip`.

    Truthy only when ``status`` is ``Status.OK``. ``value`` holds the produced
    number for ``try_next`` and is ``None`` otherwise.
    """
    status: Status
    value: Optional[float] = None

    def __bool__(self) -> bool:
        return self.status is Status.OK


class Sequence:
    """Stateful generator of the Halton sequence for one base.

    The k-th call to :meth:`next` returns ``number(base, k)``. Instances are
    single-writer state: do not drive one instance from several threads.

    Parameters
    ----------
    base : int
        Radix of the sequence, >= 2.
    bounds : IndexBounds, optional
        Native widths of the index counter and of remaining counts.
    step_limit : int, optional
        Skips no larger than ``max(step_limit, ladder length)`` are performed
        one step at a time; larger ones rebuild the ladder from the target
        index.
    """

    __slots__ = ("_base", "_bounds", "_step_limit", "_index",
                 "_digits", "_weights", "_above", "_value")

    def __init__(self, base: int, *, bounds: IndexBounds = DEFAULT_BOUNDS,
                 step_limit: int = STEP_LIMIT) -> None:
        self._base = check_base(base, bounds)
        self._bounds = bounds
        self._step_limit = check_count(step_limit, "step_limit")
        self._rebuild(0)

    @classmethod
    def at(cls, base: int, index: int, **kwargs) -> "Sequence":
        """Return a sequence positioned at ``index``; its next value is ``number(base, index + 1)``."""
        seq = cls(base, **kwargs)
        seq.skip(check_index(index, seq._bounds))
        return seq

    # ------------------------------------------------------------------
    @property
    def base(self) -> int:
        return self._base

    @property
    def bounds(self) -> IndexBounds:
        return self._bounds

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> float:
        """Value at the current index (0.0 while fresh)."""
        return self._value

    @property
    def state(self) -> State:
        if self._index == 0:
            return State.FRESH
        if self._index >= self._bounds.max_index:
            return State.EXHAUSTED
        return State.ACTIVE

    # ------------------------------------------------------------------
    def _rebuild(self, index: int) -> None:
        digits, weights = ladder(self._base, index)
        above = [0.0] * len(digits)
        for l in range(len(digits) - 2, -1, -1):
            above[l] = above[l + 1] + digits[l + 1] * weights[l + 1]
        self._digits: List[int] = digits
        self._weights: List[float] = weights
        self._above: List[float] = above
        self._index = index
        self._value = above[0] + digits[0] * weights[0]

    def _step(self) -> float:
        base = self._base
        digits = self._digits
        weights = self._weights
        above = self._above
        self._index += 1

        digits[0] += 1
        if digits[0] < base:
            self._value = above[0] + digits[0] * weights[0]
            return self._value

        l = 0
        while digits[l] == base:
            digits[l] = 0
            l += 1
            if l == len(digits):
                digits.append(0)
                weights.append(weights[-1] / base)
                above.append(0.0)
                _log(f"base-{base} ladder grew to {len(digits)} digits at index {self._index}")
            digits[l] += 1
        s = above[l] + digits[l] * weights[l]
        for j in range(l):
            above[j] = s
        self._value = s
        return s

    def _note_exhausted(self) -> None:
        if self._index >= self._bounds.max_index:
            _log(f"base-{self._base} sequence exhausted at index {self._index}")

    # ------------------------------------------------------------------
    def next(self) -> float:
        """Advance one index and return its value.

        Raises :class:`Exhausted` once the index counter is at its maximum.
        """
        advance_target(self._base, self._index, 1, self._bounds)
        value = self._step()
        self._note_exhausted()
        return value

    def skip(self, n: int) -> None:
        """Advance the index by ``n`` without producing values.

        Landing exactly on the maximum index is allowed. A target past it
        raises :class:`IndexOverflowError` (or :class:`Exhausted` if the
        sequence has already ended) and leaves the sequence unchanged.
        """
        n = check_count(n, "n")
        target = advance_target(self._base, self._index, n, self._bounds)
        if n == 0:
            return
        if n <= max(self._step_limit, len(self._digits)):
            for _ in range(n):
                self._step()
        else:
            _log(f"base-{self._base} ladder rebuilt for skip of {n} to index {target}")
            self._rebuild(target)
        self._note_exhausted()

    def remaining(self) -> Optional[int]:
        """Number of further :meth:`next` calls possible, or None if it exceeds ``count_bits``."""
        return remaining(self._index, self._bounds)

    def try_next(self) -> Outcome:
        if self._index >= self._bounds.max_index:
            return Outcome(Status.EXHAUSTED)
        value = self._step()
        self._note_exhausted()
        return Outcome(Status.OK, value)

    def try_skip(self, n: int) -> Outcome:
        try:
            self.skip(n)
        except Exhausted:
            return Outcome(Status.EXHAUSTED)
        except IndexOverflowError:
            return Outcome(Status.OVERFLOW)
        return Outcome(Status.OK)

    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        outcome = self.try_next()
        if not outcome:
            raise StopIteration
        return outcome.value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Sequence(base={self._base}, index={self._index})"


__all__ = ["Sequence", "State", "Status", "Outcome"]
