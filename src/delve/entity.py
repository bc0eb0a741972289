from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class CollisionMap(Protocol):
    """Map interface needed by movement; TileGrid satisfies it."""

    def is_blocked(self, x: int, y: int) -> bool: ...


@dataclass
class Entity:
    """Something standing on the map: the player or an NPC.

    ``symbol`` and ``color`` are for whoever draws the map; movement only
    looks at the position.
    """

    x: int
    y: int
    symbol: str = '@'
    color: Tuple[int, int, int] = (255, 255, 255)
    name: str = "player"

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def place(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move_by(self, dx: int, dy: int, grid: CollisionMap) -> bool:
        """Step by (dx, dy) unless the target tile is blocked.

        Bumping into a wall leaves the entity where it is and returns False.
        The target must be on the map; the grid raises OutOfBoundsError
        otherwise.

        Returns:
            True if the entity moved.
        """
        tx = self.x + dx
        ty = self.y + dy
        if grid.is_blocked(tx, ty):
            logger.debug("Blocked movement for %s: target (%d,%d) is blocked", self.name, tx, ty)
            return False
        logger.debug("Entity %s moves from (%d,%d) to (%d,%d)", self.name, self.x, self.y, tx, ty)
        self.x = tx
        self.y = ty
        return True


@dataclass
class Actors:
    """The player plus any named NPCs sharing one map.

    Entities may overlap; only tile collision is enforced.
    """

    player: Entity
    npcs: Dict[str, Entity] = field(default_factory=dict)

    def add_npc(self, npc: Entity) -> None:
        if npc.name in self.npcs or npc.name == self.player.name:
            raise ValueError(f"Duplicate NPC name: {npc.name}")
        self.npcs[npc.name] = npc

    def get(self, name: str) -> Optional[Entity]:
        if name == self.player.name:
            return self.player
        return self.npcs.get(name)

    def all(self) -> Iterator[Entity]:
        """NPCs first, then the player, so the player is drawn on top."""
        yield from self.npcs.values()
        yield self.player


__all__ = ["Entity", "Actors", "CollisionMap"]
