from __future__ import annotations

from .grid import Point, TileGrid
from .rect import Rect
from .tiles import Tile


def carve_room(rect: Rect, grid: TileGrid) -> None:
    """Make every tile strictly inside ``rect`` passable; the border stays wall."""
    empty = Tile.empty()
    for y in range(rect.y1 + 1, rect.y2):
        for x in range(rect.x1 + 1, rect.x2):
            grid.set(x, y, empty)


def carve_h_tunnel(x1: int, x2: int, y: int, grid: TileGrid) -> None:
    empty = Tile.empty()
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.set(x, y, empty)


def carve_v_tunnel(y1: int, y2: int, x: int, grid: TileGrid) -> None:
    empty = Tile.empty()
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.set(x, y, empty)


def carve_corridor(a: Point, b: Point, grid: TileGrid) -> None:
    """L-shaped corridor: along a's row to b's column, then along b's column."""
    (ax, ay), (bx, by) = a, b
    carve_h_tunnel(ax, bx, ay, grid)
    carve_v_tunnel(ay, by, bx, grid)


__all__ = ["carve_room", "carve_h_tunnel", "carve_v_tunnel", "carve_corridor"]
