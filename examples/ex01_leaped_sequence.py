#!/usr/bin/env python3
"""
ex01_leaped_sequence

Builds a 'leaped' Halton sequence (every 409th value of base 17) twice: once
by direct lookups with ``number`` and once by skipping a ``Sequence``.
"""
import sys
from pathlib import Path


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def main():
    ensure_repo_on_path()
    from halton import Sequence, number

    step = 409
    direct = [number(17, i) for i in range(1, 10 * step, step)]

    seq = Sequence(17)
    leaped = [seq.next()]
    for _ in range(9):
        seq.skip(step - 1)
        leaped.append(seq.next())

    for a, b in zip(direct, leaped):
        print(f"{a:.12f}  {b:.12f}")
    print(f"remaining after index {seq.index}: {seq.remaining():,}")


if __name__ == "__main__":
    main()
