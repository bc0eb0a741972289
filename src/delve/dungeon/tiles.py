from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

COLOR_DARK_WALL: Tuple[int, int, int] = (0, 0, 100)
COLOR_DARK_GROUND: Tuple[int, int, int] = (50, 50, 150)


@dataclass(frozen=True)
class Tile:
    """A single map cell.

    - blocked: entities cannot enter the tile
    - blocks_sight: the tile is opaque to whatever draws or sees the map

    The generator only ever produces ``Tile.wall()`` and ``Tile.empty()``, but
    other combinations are valid values.
    """

    blocked: bool
    blocks_sight: bool

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, blocks_sight=False)

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, blocks_sight=True)

    @property
    def glyph(self) -> str:
        """A single-character visualization useful for logs/debug."""
        return '#' if self.blocked else '.'

    @property
    def color(self) -> Tuple[int, int, int]:
        """Background RGB for a renderer; opaque tiles draw as wall."""
        return COLOR_DARK_WALL if self.blocks_sight else COLOR_DARK_GROUND


__all__ = ["Tile", "COLOR_DARK_WALL", "COLOR_DARK_GROUND"]
