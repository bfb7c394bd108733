import pygame
import pytest

from vectorplay.geometry import Vec2, distance
from vectorplay.vectors import BLUE, RED, VectorList, VectorSegment, arrow_head


def test_add_returns_segment_and_keeps_order():
    vectors = VectorList()
    first = vectors.add(Vec2(0.0, 0.0), Vec2(1.0, 1.0))
    second = vectors.add(Vec2(2.0, 2.0), Vec2(3.0, 3.0))
    assert len(vectors) == 2
    assert list(vectors) == [first, second]
    assert first.start == Vec2(0.0, 0.0)
    assert second.end == Vec2(3.0, 3.0)


def test_remove_uses_identity():
    vectors = VectorList()
    first = vectors.add(Vec2(0.0, 0.0), Vec2(5.0, 5.0))
    second = vectors.add(Vec2(0.0, 0.0), Vec2(5.0, 5.0))
    vectors.remove(second)
    remaining = list(vectors)
    assert len(remaining) == 1
    assert remaining[0] is first


def test_remove_first_middle_last():
    vectors = VectorList()
    segs = [vectors.add(Vec2(float(i), 0.0), Vec2(float(i), 1.0)) for i in range(4)]
    vectors.remove(segs[0])
    vectors.remove(segs[2])
    assert list(vectors) == [segs[1], segs[3]]
    vectors.remove(segs[3])
    assert list(vectors) == [segs[1]]


def test_remove_missing_raises():
    vectors = VectorList()
    vectors.add(Vec2(0.0, 0.0), Vec2(1.0, 0.0))
    with pytest.raises(ValueError):
        vectors.remove(VectorSegment(Vec2(0.0, 0.0), Vec2(1.0, 0.0)))


def test_move_shifts_both_ends_and_keeps_direction():
    seg = VectorSegment(Vec2(1.0, 2.0), Vec2(4.0, 6.0))
    before = seg.direction()
    seg.move(3.0, -3.0)
    assert seg.start == Vec2(1.0, 2.0) + Vec2(3.0, -3.0)
    assert seg.end == Vec2(4.0, 6.0) + Vec2(3.0, -3.0)
    assert seg.direction() == before


def test_direction_is_end_minus_start():
    seg = VectorSegment(Vec2(1.0, 2.0), Vec2(4.0, 6.0))
    assert seg.start + seg.direction() == seg.end


def test_arrow_head_corners_lie_at_size_from_tip():
    start, end = Vec2(10.0, 10.0), Vec2(80.0, 40.0)
    for corner in arrow_head(start, end, 25):
        assert distance(corner, end) == pytest.approx(25)


def test_arrow_head_corners_differ():
    first, second = arrow_head(Vec2(0.0, 0.0), Vec2(50.0, 0.0), 25)
    assert distance(first, second) > 1


def _pixel(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_draw_colours_highlighted_and_plain():
    surface = pygame.Surface((200, 100))
    vectors = VectorList()
    marked = vectors.add(Vec2(10.0, 10.0), Vec2(150.0, 10.0))
    vectors.add(Vec2(10.0, 70.0), Vec2(150.0, 70.0))
    vectors.draw(surface, [marked, None])
    assert _pixel(surface, (10, 10)) == RED
    assert _pixel(surface, (10, 70)) == BLUE
    assert _pixel(surface, (60, 10)) == RED


def test_draw_without_highlight_is_all_blue():
    surface = pygame.Surface((200, 100))
    vectors = VectorList()
    vectors.add(Vec2(20.0, 50.0), Vec2(150.0, 50.0))
    vectors.draw(surface, [None, None])
    assert _pixel(surface, (20, 50)) == BLUE
    assert _pixel(surface, (5, 5)) == (0, 0, 0)