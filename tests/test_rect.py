import pytest

from delve.dungeon.rect import Rect


def test_new_builds_corners_from_origin_and_size():
    r = Rect.new(3, 4, 6, 8)
    assert (r.x1, r.y1, r.x2, r.y2) == (3, 4, 9, 12)
    assert (r.width, r.height) == (6, 8)


def test_new_rejects_empty_sizes():
    with pytest.raises(ValueError):
        Rect.new(0, 0, 0, 5)
    with pytest.raises(ValueError):
        Rect.new(0, 0, 5, -1)


def test_center_uses_floor_division():
    assert Rect.new(2, 2, 6, 6).center() == (5, 5)
    # odd spans round toward the lower coordinate
    assert Rect.new(0, 0, 7, 9).center() == (3, 4)


def test_center_lies_inside_room():
    r = Rect.new(10, 1, 6, 7)
    cx, cy = r.center()
    assert r.x1 < cx < r.x2
    assert r.y1 < cy < r.y2


def test_overlapping_rects_intersect_both_ways():
    a = Rect.new(0, 0, 6, 6)
    b = Rect.new(3, 3, 6, 6)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_count_as_intersecting():
    a = Rect.new(0, 0, 6, 6)
    right = Rect.new(6, 0, 6, 6)
    below = Rect.new(0, 6, 6, 6)
    corner = Rect.new(6, 6, 6, 6)
    assert a.intersects(right)
    assert a.intersects(below)
    assert a.intersects(corner)


def test_separated_rects_do_not_intersect():
    a = Rect.new(0, 0, 6, 6)
    assert not a.intersects(Rect.new(7, 0, 6, 6))
    assert not a.intersects(Rect.new(0, 7, 6, 6))
    # overlapping on one axis only
    assert not a.intersects(Rect.new(2, 10, 3, 3))
