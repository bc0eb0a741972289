from collections import deque
from typing import Set

from .grid import Point, TileGrid


def flood_fill(grid: TileGrid, start: Point) -> Set[Point]:
    """Return every non-blocked coordinate reachable from start with 4-way steps.

    A blocked start reaches nothing.
    """
    if grid.is_blocked(*start):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nx, ny in grid.neighbors(x, y):
            if (nx, ny) not in seen and not grid.is_blocked(nx, ny):
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen


def is_reachable(grid: TileGrid, start: Point, goal: Point) -> bool:
    return goal in flood_fill(grid, start)
