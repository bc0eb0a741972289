from __future__ import annotations

import logging
from typing import Generator, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import OutOfBoundsError
from .tiles import Tile

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class TileGrid:
    """A fixed-size, bounds-checked 2D tile grid.

    The grid is created once per session with every cell set to the default
    tile (walls for generation) and is only mutated by carving. All access goes
    through ``get``/``set``, which raise ``OutOfBoundsError`` for coordinates
    outside ``[0, width) x [0, height)`` so that caller bugs surface
    immediately instead of wrapping around or corrupting neighbouring rows.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int, height: int, default_tile: Optional[Tile] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("TileGrid dimensions must be positive")
        default_tile = default_tile if default_tile is not None else Tile.wall()
        self._w = int(width)
        self._h = int(height)
        # tiles[y][x]
        self._tiles: List[List[Tile]] = [[default_tile for _ in range(self._w)] for _ in range(self._h)]
        logger.debug("Initialized TileGrid %dx%d", self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def is_within(self, x: int, y: int) -> bool:
        """Check if coordinates are within the grid bounds. Never raises."""
        return 0 <= x < self._w and 0 <= y < self._h

    def _check(self, x: int, y: int) -> None:
        if not self.is_within(x, y):
            raise OutOfBoundsError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")

    def get(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y); raises OutOfBoundsError outside the grid."""
        self._check(x, y)
        return self._tiles[y][x]

    def set(self, x: int, y: int, tile: Tile) -> None:
        """Replace the tile at (x, y); raises OutOfBoundsError outside the grid."""
        if not isinstance(tile, Tile):
            raise TypeError("tile must be a Tile instance")
        self._check(x, y)
        self._tiles[y][x] = tile

    def is_blocked(self, x: int, y: int) -> bool:
        return self.get(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self.get(x, y).blocks_sight

    def neighbors(self, x: int, y: int) -> Generator[Point, None, None]:
        """Yield in-bounds 4-way neighbours in a fixed order."""
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if self.is_within(nx, ny):
                yield (nx, ny)

    def count_empty(self) -> int:
        return sum(1 for row in self._tiles for tile in row if not tile.blocked)

    def snapshot(self) -> Tuple[Tuple[Tuple[bool, bool], ...], ...]:
        """Deterministic, hashable snapshot of the tiles for equality tests."""
        return tuple(tuple((t.blocked, t.blocks_sight) for t in row) for row in self._tiles)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "TileGrid":
        """Build a grid from ASCII rows: '#' is wall, anything else is empty."""
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                grid.set(x, y, Tile.wall() if ch == '#' else Tile.empty())
        return grid

    def to_lines(self, overlay: Iterable[Tuple[int, int, str]] = ()) -> List[str]:
        """ASCII representation; overlay items are (x, y, symbol) drawn on top."""
        rows = [[tile.glyph for tile in row] for row in self._tiles]
        for x, y, symbol in overlay:
            self._check(x, y)
            rows[y][x] = symbol
        return [''.join(row) for row in rows]

    def __repr__(self) -> str:
        return f"TileGrid(width={self._w}, height={self._h})"


__all__ = ["TileGrid", "Point"]
