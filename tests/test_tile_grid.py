import pytest

from delve.dungeon.grid import TileGrid
from delve.dungeon.tiles import COLOR_DARK_GROUND, COLOR_DARK_WALL, Tile
from delve.exceptions import DelveError, OutOfBoundsError


def test_canonical_tiles():
    assert Tile.empty() == Tile(blocked=False, blocks_sight=False)
    assert Tile.wall() == Tile(blocked=True, blocks_sight=True)
    assert Tile.wall().glyph == '#'
    assert Tile.empty().glyph == '.'
    assert Tile.wall().color == COLOR_DARK_WALL
    assert Tile.empty().color == COLOR_DARK_GROUND


def test_new_grid_is_all_wall():
    grid = TileGrid(5, 4)
    assert (grid.width, grid.height) == (5, 4)
    assert all(grid.is_blocked(x, y) and grid.blocks_sight(x, y) for x in range(5) for y in range(4))
    assert grid.count_empty() == 0


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        TileGrid(0, 3)


def test_set_and_get_are_bounds_checked():
    grid = TileGrid(3, 2)
    grid.set(2, 1, Tile.empty())
    assert grid.get(2, 1) == Tile.empty()
    assert not grid.is_blocked(2, 1)

    for x, y in ((-1, 0), (0, -1), (3, 0), (0, 2)):
        assert grid.is_within(x, y) is False
        with pytest.raises(OutOfBoundsError):
            grid.get(x, y)
        with pytest.raises(OutOfBoundsError):
            grid.set(x, y, Tile.empty())


def test_out_of_bounds_error_is_an_index_error():
    grid = TileGrid(2, 2)
    with pytest.raises(IndexError):
        grid.is_blocked(5, 5)
    assert issubclass(OutOfBoundsError, DelveError)


def test_set_requires_tile():
    grid = TileGrid(2, 2)
    with pytest.raises(TypeError):
        grid.set(0, 0, "floor")  # type: ignore[arg-type]


def test_uncommon_tile_combination_is_allowed():
    grid = TileGrid(1, 1)
    glass = Tile(blocked=True, blocks_sight=False)
    grid.set(0, 0, glass)
    assert grid.is_blocked(0, 0)
    assert not grid.blocks_sight(0, 0)


def test_neighbors_stay_in_bounds():
    grid = TileGrid(2, 2)
    assert set(grid.neighbors(0, 0)) == {(1, 0), (0, 1)}
    assert set(grid.neighbors(1, 1)) == {(1, 0), (0, 1)}


def test_lines_round_trip_and_overlay():
    lines = ["####", "#..#", "####"]
    grid = TileGrid.from_lines(lines)
    assert grid.to_lines() == lines
    assert grid.count_empty() == 2
    assert grid.to_lines([(1, 1, '@')]) == ["####", "#@.#", "####"]


def test_from_lines_rejects_ragged_rows():
    with pytest.raises(ValueError):
        TileGrid.from_lines(["###", "##"])


def test_snapshot_changes_with_tiles():
    a = TileGrid(3, 3)
    b = TileGrid(3, 3)
    assert a.snapshot() == b.snapshot()
    b.set(1, 1, Tile.empty())
    assert a.snapshot() != b.snapshot()
