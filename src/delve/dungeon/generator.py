from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..config import GenerationSettings
from ..exceptions import ConfigError
from ..rng import IntSource, RandomSource
from .carving import carve_corridor, carve_room
from .grid import Point, TileGrid
from .rect import Rect

logger = logging.getLogger(__name__)

SpawnCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class GeneratedMap:
    """Result of one generation run.

    ``rooms`` lists the accepted rectangles in acceptance order. When no room
    was accepted the spawn falls back to the grid center and
    ``spawn_from_room`` is False.
    """

    grid: TileGrid
    spawn: Point
    rooms: Tuple[Rect, ...]
    spawn_from_room: bool


def accept_candidate(accepted: Sequence[Rect], candidate: Rect) -> bool:
    """A candidate is accepted only if it touches none of the accepted rooms."""
    return not any(candidate.intersects(other) for other in accepted)


class RoomsGenerator:
    """Rooms + corridors generator using rejection sampling.

    Algorithm:
    - Start from a grid that is entirely wall.
    - Make exactly ``max_rooms`` placement attempts. Each attempt draws a
      size in ``[room_min_size, room_max_size]`` and an origin that keeps the
      room inside the grid, then rejects the candidate if it overlaps or
      touches any accepted room.
    - Accepted rooms are carved; the first one provides the spawn point and
      every later one is joined to the room accepted just before it by an
      L-shaped corridor, giving a linear chain.

    There is no retry budget beyond the fixed attempts, so a crowded grid can
    end up with fewer rooms (or none).
    """

    def __init__(
        self,
        max_rooms: int = 30,
        room_min_size: int = 6,
        room_max_size: int = 10,
    ) -> None:
        if max_rooms < 0:
            raise ConfigError(f"max_rooms must be >= 0, got {max_rooms}")
        if room_min_size <= 0:
            raise ConfigError(f"room_min_size must be positive, got {room_min_size}")
        if room_min_size > room_max_size:
            raise ConfigError(f"room_min_size ({room_min_size}) exceeds room_max_size ({room_max_size})")
        self.max_rooms = max_rooms
        self.room_min_size = room_min_size
        self.room_max_size = room_max_size

    def _propose(self, width: int, height: int, rng: IntSource) -> Rect:
        w = rng.randint(self.room_min_size, self.room_max_size)
        h = rng.randint(self.room_min_size, self.room_max_size)
        # Origins in [0, width - w) so the far corner stays inside the grid.
        x = rng.randint(0, width - w - 1)
        y = rng.randint(0, height - h - 1)
        return Rect.new(x, y, w, h)

    def generate(
        self,
        width: int,
        height: int,
        rng: Optional[IntSource] = None,
        on_spawn: Optional[SpawnCallback] = None,
    ) -> GeneratedMap:
        if width <= self.room_max_size or height <= self.room_max_size:
            raise ConfigError(
                f"Grid {width}x{height} cannot hold rooms up to {self.room_max_size} tiles"
            )
        rng = rng if rng is not None else RandomSource()
        grid = TileGrid(width, height)
        logger.debug(
            "Generating %dx%d map: max_rooms=%d room_size=[%d,%d]",
            width, height, self.max_rooms, self.room_min_size, self.room_max_size,
        )

        accepted: Tuple[Rect, ...] = ()
        for attempt in range(self.max_rooms):
            candidate = self._propose(width, height, rng)
            if not accept_candidate(accepted, candidate):
                logger.debug("Attempt %d rejected %s", attempt, candidate)
                continue
            carve_room(candidate, grid)
            if accepted:
                carve_corridor(accepted[-1].center(), candidate.center(), grid)
            accepted = accepted + (candidate,)

        if accepted:
            spawn = accepted[0].center()
            from_room = True
        else:
            spawn = (width // 2, height // 2)
            from_room = False
            logger.warning("No rooms accepted after %d attempts; spawn defaults to grid center %s", self.max_rooms, spawn)

        if len(accepted) < self.max_rooms:
            logger.info("Accepted %d of %d room attempts", len(accepted), self.max_rooms)
        if on_spawn is not None:
            on_spawn(*spawn)
        return GeneratedMap(grid=grid, spawn=spawn, rooms=accepted, spawn_from_room=from_room)


def make_map(settings: GenerationSettings, rng: Optional[IntSource] = None, on_spawn: Optional[SpawnCallback] = None) -> GeneratedMap:
    """Generate a map from GenerationSettings, seeding from settings.seed when no rng is given."""
    generator = RoomsGenerator(
        max_rooms=settings.max_rooms,
        room_min_size=settings.room_min_size,
        room_max_size=settings.room_max_size,
    )
    if rng is None:
        rng = RandomSource(settings.seed)
    return generator.generate(settings.width, settings.height, rng, on_spawn=on_spawn)


__all__ = ["GeneratedMap", "RoomsGenerator", "accept_candidate", "make_map"]
