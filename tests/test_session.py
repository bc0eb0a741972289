from delve.config import GenerationSettings
from delve.entity import Entity
from delve.session import DungeonSession

SETTINGS = GenerationSettings(width=40, height=30, max_rooms=3, room_min_size=6, room_max_size=10)


def test_player_starts_on_spawn(three_room_source):
    session = DungeonSession(SETTINGS, rng=three_room_source)
    assert session.player.pos == (5, 5)
    assert session.map.spawn == (5, 5)
    assert len(session.map.rooms) == 3


def test_move_player_reports_whether_a_turn_was_used(three_room_source):
    session = DungeonSession(SETTINGS, rng=three_room_source)
    assert session.move_player(0, -1) is True
    assert session.move_player(0, -1) is True
    assert session.player.pos == (5, 3)
    # top wall of the first room
    assert session.move_player(0, -1) is False
    assert session.player.pos == (5, 3)


def test_player_can_walk_the_corridor_to_the_next_room(three_room_source):
    session = DungeonSession(SETTINGS, rng=three_room_source)
    for _ in range(15):
        assert session.move_player(1, 0) is True
    assert session.player.pos == (20, 5)
    for _ in range(15):
        assert session.move_player(0, 1) is True
    assert session.player.pos == (20, 20)


def test_render_lines_overlays_actors(three_room_source):
    bob = Entity(20, 20, symbol='B', color=(255, 255, 0), name="bob")
    session = DungeonSession(SETTINGS, rng=three_room_source, npcs=[bob])
    lines = session.render_lines()
    assert len(lines) == 30
    assert all(len(line) == 40 for line in lines)
    assert lines[5][5] == '@'
    assert lines[20][20] == 'B'
    assert lines[0] == '#' * 40
