"""Exception types raised by the sequence generators."""

from __future__ import annotations


class HaltonError(Exception):
    """Base class for halton errors."""


class InvalidBaseError(HaltonError, ValueError):
    """Base outside ``[2, MAX_INDEX]``."""

    def __init__(self, base: int) -> None:
        super().__init__(f"base must be >= 2 (got {base})" if base < 2
                         else f"base does not fit the native index width (got {base})")
        self.base = base


class Exhausted(HaltonError):
    """The index counter reached its maximum; the sequence has ended."""

    def __init__(self, base: int, index: int) -> None:
        super().__init__(f"sequence for base {base} exhausted at index {index}")
        self.base = base
        self.index = index


class IndexOverflowError(HaltonError, OverflowError):
    """A requested index lies beyond what the index counter can hold."""

    def __init__(self, requested: int, max_index: int) -> None:
        super().__init__(f"index {requested} exceeds the maximum index {max_index}")
        self.requested = requested
        self.max_index = max_index


__all__ = ["HaltonError", "InvalidBaseError", "Exhausted", "IndexOverflowError"]
