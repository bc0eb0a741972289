"""
delve package root.

Procedural rooms-and-corridors dungeon generation and the tile collision model
used by entity movement. Rendering and input live outside this package.
"""
from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("delve")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
