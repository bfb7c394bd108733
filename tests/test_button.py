import pygame
import pytest

from vectorplay.button import WHITE, Button
from vectorplay.controls import FrameInput
from vectorplay.geometry import Vec2


@pytest.fixture
def button():
    return Button(100.0, 50.0, 200.0, 30.0, "Create Vector")


def test_contains_inclusive_top_left_exclusive_bottom_right(button):
    assert button.contains(Vec2(100.0, 50.0))
    assert button.contains(Vec2(299.0, 79.0))
    assert not button.contains(Vec2(300.0, 60.0))
    assert not button.contains(Vec2(150.0, 80.0))
    assert not button.contains(Vec2(99.0, 60.0))


def test_pressed_needs_click_inside(button):
    assert button.is_pressed(FrameInput(mouse=Vec2(150.0, 60.0), left_pressed=True))
    assert not button.is_pressed(FrameInput(mouse=Vec2(150.0, 60.0), left_pressed=False))
    assert not button.is_pressed(FrameInput(mouse=Vec2(10.0, 10.0), left_pressed=True))


def test_release_alone_is_not_a_press(button):
    frame = FrameInput(mouse=Vec2(150.0, 60.0), left_released=True)
    assert not button.is_pressed(frame)


def test_draw_fills_rectangle_white(button):
    surface = pygame.Surface((400, 200))
    button.draw(surface)
    assert tuple(surface.get_at((101, 51)))[:3] == WHITE
    assert tuple(surface.get_at((298, 78)))[:3] == WHITE
    assert tuple(surface.get_at((50, 20)))[:3] == (0, 0, 0)


def test_draw_renders_label_in_black(button):
    surface = pygame.Surface((400, 200))
    button.draw(surface)
    label_area = [
        tuple(surface.get_at((x, y)))[:3]
        for x in range(120, 299)
        for y in range(55, 79)
    ]
    darkest = min(label_area, key=sum)
    assert sum(darkest) < 3 * 128


def test_draw_with_empty_label_leaves_rectangle_white():
    surface = pygame.Surface((400, 200))
    Button(100.0, 50.0, 200.0, 30.0, "").draw(surface)
    label_area = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(120, 299)
        for y in range(55, 79)
    }
    assert label_area == {WHITE}