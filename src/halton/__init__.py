"""Fast generation of Halton sequences.

Halton sequences are deterministic low-discrepancy sequences that look
random; their uniform coverage and repeatability make them suited to choosing
sample points or placing objects in 2-D or 3-D space.
"""

from .main import (
    number,
    numbers,
    points,
    jitter_grid,
    each,
)
from .compose import Composer
from .sequence import Sequence, State, Status, Outcome
from .params import IndexBounds, DEFAULT_BOUNDS, MAX_INDEX, NATIVE_BITS, STEP_LIMIT
from .errors import (
    HaltonError,
    InvalidBaseError,
    Exhausted,
    IndexOverflowError,
)

__all__ = [
    "number",
    "numbers",
    "points",
    "jitter_grid",
    "each",
    "Composer",
    "Sequence",
    "State",
    "Status",
    "Outcome",
    "IndexBounds",
    "DEFAULT_BOUNDS",
    "MAX_INDEX",
    "NATIVE_BITS",
    "STEP_LIMIT",
    "HaltonError",
    "InvalidBaseError",
    "Exhausted",
    "IndexOverflowError",
]
