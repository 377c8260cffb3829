"""Flood fill over a grid of characters."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, MutableSequence

FILL = "F"


@dataclass(frozen=True)
class Point:
    """A grid position or size: x is the column, y the row."""

    x: int
    y: int


def _neighbours(x: int, y: int, size: Point):
    if y > 0:
        yield x, y - 1
    if y < size.y - 1:
        yield x, y + 1
    if x > 0:
        yield x - 1, y
    if x < size.x - 1:
        yield x + 1, y


def flood_fill(grid: List[MutableSequence[str]], size: Point, begin: Point) -> int:
    """Fill the region around ``begin`` with ``'F'`` in place.

    The character at ``begin`` is the one being flooded. Every cell holding
    that character and joined, through such cells, to any ``'F'`` cell is
    turned into ``'F'``. Returns the number of cells that changed.
    """
    if not (0 <= begin.x < size.x and 0 <= begin.y < size.y):
        raise IndexError(f"start {begin} lies outside a grid of size {size}")
    drown = grid[begin.y][begin.x]
    if drown == FILL:
        return 0
    grid[begin.y][begin.x] = FILL
    changed = 1
    queue = deque(
        (x, y) for y in range(size.y) for x in range(size.x) if grid[y][x] == FILL
    )
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, size):
            if grid[ny][nx] == drown:
                grid[ny][nx] = FILL
                changed += 1
                queue.append((nx, ny))
    return changed