#!/usr/bin/env python3
"""
ex00_grid_placement

Places the letters A..Z on a 10 x 10 grid using the 2-D Halton sequence in
bases (2, 3). Consecutive letters land far apart and the grid fills evenly.
"""
import string
import sys
from pathlib import Path


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def main():
    ensure_repo_on_path()
    from halton import each

    grid = [["." for _ in range(10)] for _ in range(10)]
    for (x, y), c in zip(each(2, 3).take(26), string.ascii_uppercase):
        grid[int(y * 10)][int(x * 10)] = c

    for row in grid:
        print(" ".join(row))


if __name__ == "__main__":
    main()
