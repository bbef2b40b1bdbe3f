from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

NATIVE_BITS = 64  # width of the host's native unsigned integer
STEP_LIMIT = 16   # skips up to this size are done one step at a time


@dataclass(frozen=True)
class IndexBounds:
    """Native integer widths bounding a sequence's index counter.

    Parameters
    ----------
    index_bits : int
        Width of the unsigned index counter. The largest reachable index is
        ``2**index_bits - 1``.
    count_bits : int
        Width of the unsigned integer used to report remaining counts. When
        the true count does not fit, ``remaining()`` reports ``None``.
    """
    index_bits: int = NATIVE_BITS
    count_bits: int = NATIVE_BITS

    def __post_init__(self) -> None:
        for name in ("index_bits", "count_bits"):
            bits = getattr(self, name)
            if isinstance(bits, bool) or not isinstance(bits, int):
                raise TypeError(f"{name} must be an int (got {bits!r})")
            if bits < 1 or bits > NATIVE_BITS:
                raise ValueError(f"{name} must be in [1, {NATIVE_BITS}] (got {bits})")

    @property
    def max_index(self) -> int:
        return (1 << self.index_bits) - 1

    @property
    def max_count(self) -> int:
        return (1 << self.count_bits) - 1

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_BOUNDS = IndexBounds()
MAX_INDEX = DEFAULT_BOUNDS.max_index


__all__ = ["IndexBounds", "DEFAULT_BOUNDS", "MAX_INDEX", "NATIVE_BITS", "STEP_LIMIT"]
