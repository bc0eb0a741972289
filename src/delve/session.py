from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import GenerationSettings
from .dungeon.generator import GeneratedMap, make_map
from .dungeon.grid import TileGrid
from .entity import Actors, Entity
from .rng import IntSource

logger = logging.getLogger(__name__)


class DungeonSession:
    """Owns one generated map and the actors walking on it.

    The map is generated once, at construction, and the player is placed on
    the spawn point through the generator's spawn callback. After that the
    grid is only read: by movement checks here and by whatever renders it.
    """

    def __init__(
        self,
        settings: GenerationSettings,
        rng: Optional[IntSource] = None,
        npcs: Iterable[Entity] = (),
    ) -> None:
        settings.validate()
        self.settings = settings
        self.actors = Actors(player=Entity(0, 0))
        for npc in npcs:
            self.actors.add_npc(npc)
        self.map: GeneratedMap = make_map(settings, rng=rng, on_spawn=self.actors.player.place)
        logger.info(
            "Session ready: %d rooms, player at %s", len(self.map.rooms), self.actors.player.pos
        )

    @property
    def grid(self) -> TileGrid:
        return self.map.grid

    @property
    def player(self) -> Entity:
        return self.actors.player

    def move_player(self, dx: int, dy: int) -> bool:
        """Returns True when the player actually moved (i.e. a turn was used)."""
        return self.player.move_by(dx, dy, self.grid)

    def render_lines(self) -> List[str]:
        overlay = [(e.x, e.y, e.symbol) for e in self.actors.all() if self.grid.is_within(e.x, e.y)]
        return self.grid.to_lines(overlay)


__all__ = ["DungeonSession"]
