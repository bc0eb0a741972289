"""
Dungeon map systems: tiles, the bounds-checked grid, room rectangles, carving
helpers and the rooms-and-corridors generator.
"""
from .generator import GeneratedMap, RoomsGenerator, accept_candidate, make_map
from .grid import TileGrid
from .rect import Rect
from .tiles import Tile

__all__ = [
    "GeneratedMap",
    "Rect",
    "RoomsGenerator",
    "Tile",
    "TileGrid",
    "accept_candidate",
    "make_map",
]
