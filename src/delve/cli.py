from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import GenerationSettings
from .dungeon.pathfinding import flood_fill
from .exceptions import ConfigError
from .logging_config import configure_logging
from .session import DungeonSession

logger = logging.getLogger(__name__)

_OVERRIDES = ("width", "height", "max_rooms", "room_min_size", "room_max_size", "seed")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="delve", description="Generate a rooms-and-corridors dungeon map")
    parser.add_argument("--config", help="YAML file with generation settings")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible layout")
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--max-rooms", dest="max_rooms", type=int)
    parser.add_argument("--room-min-size", dest="room_min_size", type=int)
    parser.add_argument("--room-max-size", dest="room_max_size", type=int)
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of the ASCII map")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> GenerationSettings:
    settings = GenerationSettings.load(path=args.config)
    overrides = {k: getattr(args, k) for k in _OVERRIDES if getattr(args, k) is not None}
    if overrides:
        settings = GenerationSettings.from_dict({**settings.as_dict(), **overrides})
    return settings


def summarize(session: DungeonSession) -> Dict[str, Any]:
    result = session.map
    connected = True
    if result.rooms:
        reachable = flood_fill(result.grid, result.spawn)
        connected = all(room.center() in reachable for room in result.rooms)
    return {
        "settings": session.settings.as_dict(),
        "spawn": list(result.spawn),
        "spawn_from_room": result.spawn_from_room,
        "rooms": [
            {"x1": r.x1, "y1": r.y1, "x2": r.x2, "y2": r.y2, "center": list(r.center())}
            for r in result.rooms
        ],
        "floor_tiles": result.grid.count_empty(),
        "connected": connected,
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = build_settings(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 2

    session = DungeonSession(settings)
    if args.json:
        print(json.dumps(summarize(session), indent=2, sort_keys=True))
    else:
        print("\n".join(session.render_lines()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
